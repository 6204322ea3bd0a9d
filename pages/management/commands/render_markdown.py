"""
Management command to render a markdown file to HTML.

Renders a full page (header, body, footer, asset references) by default, the
same output the site serves for a page. Use --fragment for the bare body.
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from pages.markdown.renderer import render_markdown


class Command(BaseCommand):
    help = 'Render a markdown file to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='Markdown file to render',
        )
        parser.add_argument(
            '--fragment',
            action='store_true',
            help='Render only the body, without header, footer and assets',
        )
        parser.add_argument(
            '--no-highlight',
            action='store_true',
            help='Render code blocks as escaped plain text',
        )
        parser.add_argument(
            '--inline-styles',
            action='store_true',
            help='Emit inline style attributes instead of CSS classes',
        )
        parser.add_argument(
            '--style',
            type=str,
            help='Highlight style (theme) name',
        )
        parser.add_argument(
            '--no-line-numbers',
            action='store_true',
            help='Hide line numbers in code blocks',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write HTML to this file instead of stdout',
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f'Markdown file not found: {path}')

        overrides = {'full_render': not options.get('fragment')}
        if options.get('no_highlight'):
            overrides['syntax_highlight'] = False
        if options.get('inline_styles'):
            overrides['use_classes'] = False
        if options.get('style'):
            overrides['highlight_style'] = options['style']
        if options.get('no_line_numbers'):
            overrides['line_numbers'] = False

        html = render_markdown(path.read_text(encoding='utf-8'), **overrides)

        output = options.get('output')
        if output:
            Path(output).write_text(html, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Wrote {len(html)} characters to {output}'))
        else:
            self.stdout.write(html)
