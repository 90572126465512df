import json
import logging

import click

from student_resume.app.api.routes.route_logic.share_token import build_share_url
from student_resume.app.core.config import get_settings
from student_resume.app.pdf.exceptions import RenderSinkError
from student_resume.app.pdf.registry import available_templates, configure_unicode_font, render

log = logging.getLogger(__name__)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Management script for the Student Resume service."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    configure_unicode_font(get_settings().pdf_unicode_font_path)


@cli.command("render")
@click.argument("input_json", type=click.File("r", encoding="utf-8"))
@click.argument("output_pdf", type=click.File("wb"))
@click.option("-t", "--template", default=None, help="Template name, e.g. modern or technical.")
@click.option("-l", "--layout", default=None, help="Layout hint: single-column or two-column.")
def render_command(input_json, output_pdf, template: str | None, layout: str | None):
    """
    Render a resume described by a JSON file to a PDF file.

    The JSON object holds the resume sections at the top level and the
    student's name, email and branch under "studentInfo".

    Args:
        input_json: The open JSON file.
        output_pdf: The open output file.
        template (str | None): The template name. Defaults to the configured template.
        layout (str | None): The layout hint. Defaults to the configured layout.

    Returns:
        None

    Notes:
        1. Load the JSON document.
        2. Render it with the requested or default template.
        3. Print the template used and the number of bytes written.
        4. Exit with status 1 when the input is not valid JSON or the output cannot be written.

    """
    _msg = "render_command starting"
    log.debug(_msg)
    settings = get_settings()
    try:
        document = json.load(input_json)
    except json.JSONDecodeError as e:
        _error_msg = f"Invalid resume JSON: {e}"
        click.echo(_error_msg, err=True)
        log.error(_error_msg)
        raise SystemExit(1)
    if not isinstance(document, dict):
        document = {}

    student_info = document.get("studentInfo") or document.get("student_info")
    try:
        result = render(
            document,
            student_info,
            output_pdf,
            template=template or settings.default_template,
            layout=layout or settings.default_layout,
        )
    except RenderSinkError as e:
        _error_msg = f"Could not write PDF: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
        raise SystemExit(1)

    if result.degraded:
        click.echo(f"Template failed, wrote error document instead: {result.error}", err=True)
    _success_msg = f"Rendered {result.template} resume ({result.byte_count} bytes)"
    click.echo(_success_msg)
    log.info(_success_msg)
    _msg = "render_command returning"
    log.debug(_msg)


@cli.command("share-link")
@click.argument("student_id", type=int)
def share_link(student_id: int):
    """Print a public share link for a student's resume."""
    click.echo(build_share_url(get_settings().share_base_url, student_id))


@cli.command("list-templates")
def list_templates():
    """List the accepted template names."""
    for name in available_templates():
        click.echo(name)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
