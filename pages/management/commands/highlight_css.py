"""
Management command to write the code highlighting stylesheet.

Pages inline this CSS when code is highlighted with classes. Write it to a
static file instead when serving it separately, e.g.:

    python manage.py highlight_css --style monokai --output static/highlight.css
"""

from pathlib import Path

from django.core.management.base import BaseCommand

from pages.markdown.config import get_render_options
from pages.markdown.stylesheet import available_styles, emit_css


class Command(BaseCommand):
    help = 'Write the CSS for a code highlighting theme'

    def add_arguments(self, parser):
        parser.add_argument(
            '--style',
            type=str,
            help='Theme name (default: configured highlight_style)',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write CSS to this file instead of stdout',
        )
        parser.add_argument(
            '--list',
            action='store_true',
            help='List available theme names and exit',
        )

    def handle(self, *args, **options):
        if options.get('list'):
            for name in available_styles():
                self.stdout.write(name)
            return

        style = options.get('style') or get_render_options().highlight_style
        css = emit_css(style)

        output = options.get('output')
        if output:
            path = Path(output)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(css, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Wrote {style} stylesheet to {path}'))
        else:
            self.stdout.write(css)
