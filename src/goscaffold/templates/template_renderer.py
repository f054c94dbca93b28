"""Render the generated-file templates bundled with a package.

Templates are Jinja2 files under ``<package>.templates``. Each one is a pure
function of its variables, so rendering never touches the output tree.
"""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render one bundled template to the exact text of the generated file.

    Args:
        template_name: Template filename, e.g. "Makefile.j2".
        package: Package whose ``templates`` subpackage holds the file
            (callers pass __package__).
        **kwargs: Template variables, normally just ``project_name``.

    Raises:
        FileNotFoundError: No such template in the package.
        jinja2.UndefinedError: The template uses a variable not passed in.
    """
    source = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    template = jinja2.Template(
        source.read_text(encoding="utf-8"),
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    return template.render(**kwargs)
