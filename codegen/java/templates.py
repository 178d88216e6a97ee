"""
Codegen Kernel — Templates

Mustache templates for the two aggregator files plus their header comments.
Header text, import order, and indentation are part of the output contract:
regenerating from an unchanged model must give byte-identical files.

Everything is interpolated with triple mustaches. Java generics would
otherwise be HTML-escaped.
"""

# Written on every run.
MANAGED_CODE_COMMENT = """\
/* This code is managed by Akka Serverless tooling.
 * It will be re-generated to reflect any changes to your protobuf definitions.
 * DO NOT EDIT
 */"""

# Written once, then owned by the user.
GENERATED_CODE_COMMENT = """\
/* This code was generated by Akka Serverless tooling.
 * As long as this file exists it will not be re-generated.
 * You are free to make changes to this file.
 */"""

FACTORY_CLASS_NAME = "AkkaServerlessFactory"

# Continuation indent for creator parameters and registrations.
INDENT = " " * 6

FACTORY_TEMPLATE = """\
{{{header}}}

package {{{package}}};

{{#imports}}
import {{{.}}};
{{/imports}}

public final class {{{class_name}}} {

  public static AkkaServerless withComponents(
      {{{parameters}}}) {
    AkkaServerless akkaServerless = new AkkaServerless();
    return akkaServerless
      {{{registrations}}};
  }
}
"""

MAIN_TEMPLATE = """\
{{{header}}}

package {{{package}}};

import com.akkaserverless.javasdk.AkkaServerless;
import org.slf4j.Logger;
import org.slf4j.LoggerFactory;
{{#imports}}
import {{{.}}};
{{/imports}}

public final class {{{class_name}}} {

  private static final Logger LOG = LoggerFactory.getLogger({{{class_name}}}.class);

  public static AkkaServerless createAkkaServerless() {
    // {{{factory_class_name}}} registers every generated Action, View and Entity,
    // and is regenerated whenever your protobuf definitions change.
    // To register components by hand instead, remove this call and
    // register them on a `new AkkaServerless()` instance.
    return {{{factory_class_name}}}.withComponents(
      {{{constructors}}});
  }

  public static void main(String[] args) throws Exception {
    LOG.info("starting the Akka Serverless service");
    createAkkaServerless().start();
  }
}
"""
