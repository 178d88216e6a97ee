"""
Codegen kernel test configuration.

Model builders live in codegen/java/tests/builders.py; the fixtures here are
the ones more than one category needs.
"""

from pathlib import Path

import pytest

from codegen.java.types import GenerationLayout


@pytest.fixture
def layout(tmp_path: Path) -> GenerationLayout:
    return GenerationLayout(
        source_directory=tmp_path / "src" / "main" / "java",
        test_source_directory=tmp_path / "src" / "test" / "java",
        integration_test_source_directory=tmp_path / "src" / "it" / "java",
        generated_source_directory=tmp_path / "target" / "generated-sources" / "java",
        generated_test_source_directory=tmp_path / "target" / "generated-test-sources" / "java",
        main_class="a.b.Main",
    )
