"""
Codegen Renderer -- Composition Root Tests

Exact output structure:
  /* managed-code header */

  package <pkg>;

  import ...;            (sorted, unique)

  public final class AkkaServerlessFactory {

    public static AkkaServerless withComponents(
        <creator parameters, model order>) {
      AkkaServerless akkaServerless = new AkkaServerless();
      return akkaServerless
        .register(...)     (sorted)
        .register(...);
    }
  }
"""

from codegen.java.renderer import factory_context, factory_source
from codegen.java.templates import MANAGED_CODE_COMMENT
from codegen.java.tests.builders import (
    action_service,
    counter_greeter_model,
    entity_service,
    event_sourced_entity,
    model,
    view_service,
)
from codegen.java.types import Model

COUNTER_GREETER_FACTORY = """\
/* This code is managed by Akka Serverless tooling.
 * It will be re-generated to reflect any changes to your protobuf definitions.
 * DO NOT EDIT
 */

package a.b;

import com.akkaserverless.javasdk.AkkaServerless;
import com.akkaserverless.javasdk.action.ActionCreationContext;
import com.akkaserverless.javasdk.eventsourcedentity.EventSourcedEntityContext;
import com.google.protobuf.EmptyProto;
import java.util.function.Function;

public final class AkkaServerlessFactory {

  public static AkkaServerless withComponents(
      Function<EventSourcedEntityContext, Counter> createCounter,
      Function<ActionCreationContext, Greeter> createGreeter) {
    AkkaServerless akkaServerless = new AkkaServerless();
    return akkaServerless
      .register(CounterProvider.of(createCounter))
      .register(GreeterProvider.of(createGreeter));
  }
}
"""


def assert_before(source, first, second):
    pos_a = source.find(first)
    pos_b = source.find(second)
    assert pos_a != -1, f"{first!r} not found"
    assert pos_b != -1, f"{second!r} not found"
    assert pos_a < pos_b, f"Expected {first!r} before {second!r}"


class TestFactorySource:
    def test_counter_greeter_exact(self):
        assert factory_source("a.b", counter_greeter_model()) == COUNTER_GREETER_FACTORY

    def test_starts_with_managed_header(self):
        assert factory_source("a.b", counter_greeter_model()).startswith(MANAGED_CODE_COMMENT + "\n\npackage a.b;\n")

    def test_generics_not_escaped(self):
        source = factory_source("a.b", counter_greeter_model())
        assert "&lt;" not in source
        assert "Function<EventSourcedEntityContext, Counter>" in source

    def test_registrations_in_sorted_order(self):
        m = model(
            [event_sourced_entity("Zebra")],
            [entity_service("Zebra"), view_service("Apple"), action_service("Mango")],
        )
        source = factory_source("a.b", m)
        assert_before(source, ".register(AppleProvider", ".register(MangoProvider")
        assert_before(source, ".register(MangoProvider", ".register(ZebraProvider")
        assert source.count(".register(") == 3

    def test_parameters_in_model_order(self):
        m = model(
            [event_sourced_entity("Zebra"), event_sourced_entity("Apple")],
            [entity_service("Zebra"), entity_service("Apple")],
        )
        source = factory_source("a.b", m)
        assert_before(source, "createZebra,\n      Function<EventSourcedEntityContext, Apple>", "createApple)")

    def test_missing_entity_not_registered(self):
        m = model(
            [event_sourced_entity("Counter")],
            [entity_service("Counter"), entity_service("Ghost", component="a.b.Ghost")],
        )
        source = factory_source("a.b", m)
        assert "Ghost" not in source.split("public final class")[1]
        assert ".register(CounterProvider.of(createCounter));" in source

    def test_foreign_package_components_imported(self):
        m = model([event_sourced_entity("Counter", package="x.y")], [entity_service("Counter", package="x.y")])
        source = factory_source("a.b", m)
        assert "import x.y.Counter;\n" in source
        assert "import x.y.CounterProvider;\n" in source
        assert "import x.y.CounterApi;\n" in source

    def test_empty_model_still_renders(self):
        source = factory_source("a.b", Model())
        assert "import com.akkaserverless.javasdk.AkkaServerless;\n" in source
        assert "public static AkkaServerless withComponents(" in source


class TestFactoryContext:
    def test_materialized_lists(self):
        context = factory_context("a.b", counter_greeter_model())
        assert context["package"] == "a.b"
        assert context["class_name"] == "AkkaServerlessFactory"
        assert context["registrations"] == [
            "register(CounterProvider.of(createCounter))",
            "register(GreeterProvider.of(createGreeter))",
        ]
        assert context["parameters"] == [
            "Function<EventSourcedEntityContext, Counter> createCounter",
            "Function<ActionCreationContext, Greeter> createGreeter",
        ]
        assert context["imports"] == sorted(set(context["imports"]))
