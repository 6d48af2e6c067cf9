"""Preview heading styles by rendering every heading level as HTML."""

import argparse
import logging
import sys
from typing import List

from richtext.rich_text_context import RichTextContext
from richtext.rich_text_html_renderer import RichTextHTMLRenderer
from richtext.rich_text_scope import RichTextScope, render_rich_text
from richtext.rich_text_settings import RichTextSettings
from richtext.rich_text_theme import ColorMode
from richtext.richtext_exceptions import RichTextError


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def parse_arguments(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='richtext',
        description='Render a preview of every heading level as HTML'
    )

    parser.add_argument(
        '--theme',
        choices=['light', 'dark', 'both'],
        default='both',
        help='Theme to render the preview with (default: both)'
    )

    parser.add_argument(
        '--levels',
        type=int,
        default=10,
        help='Number of heading levels to render (default: 10)'
    )

    parser.add_argument(
        '--settings',
        help='Path to a JSON settings file providing the base font'
    )

    parser.add_argument(
        '-o', '--output',
        help='File to write the HTML to (default: stdout)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug logging'
    )

    args = parser.parse_args(argv)
    if args.levels < 0:
        parser.error("--levels must not be negative")

    return args


def render_preview(settings: RichTextSettings, color_mode: ColorMode, levels: int) -> str:
    """
    Render headings for levels 0 to `levels - 1` on one theme.

    Args:
        settings: Settings providing the base font
        color_mode: Color mode of the theme to render on
        levels: Number of heading levels to render

    Returns:
        The rendered HTML
    """
    settings = RichTextSettings(theme=color_mode, font_size=settings.font_size, font_family=settings.font_family)
    context = RichTextContext.from_settings(settings)

    def content(scope: RichTextScope) -> None:
        for level in range(levels):
            scope.heading(level, f"Heading {level + 1}")

    document = render_rich_text(context, content)
    return RichTextHTMLRenderer().visit(document)


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("richtext")

    try:
        settings = RichTextSettings.load(args.settings) if args.settings else RichTextSettings.create_default()

        if args.theme == 'both':
            color_modes = [ColorMode.LIGHT, ColorMode.DARK]

        else:
            color_modes = [ColorMode[args.theme.upper()]]

        parts = [render_preview(settings, color_mode, args.levels) for color_mode in color_modes]

    except RichTextError as e:
        logger.error("preview failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    html_text = "<!DOCTYPE html>\n<html><body>\n" + "\n".join(parts) + "\n</body></html>\n"

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(html_text)

        except OSError as e:
            logger.error("cannot write %s: %s", args.output, e)
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1

    else:
        sys.stdout.write(html_text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
