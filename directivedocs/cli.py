import argparse
import sys

from .errors import DirectiveDocsError
from .generator import DEFAULT_DEST_DIR, DEFAULT_PREFIX, DEFAULT_SOURCE, DirectiveDocGenerator, GeneratorConfig
from .utils import configure_logging, logger


def build_config(args) -> GeneratorConfig:
    return GeneratorConfig(
        source_path=args.source,
        dest_dir=args.dest,
        template_path=args.template,
        prefix=args.prefix,
        date=args.date,
        dry_run=args.dry_run,
    )


def run_once(gen: DirectiveDocGenerator) -> int:
    try:
        written = gen.generate()
    except DirectiveDocsError as e:
        logger.error("%s", e)
        return 1
    if gen.config.dry_run:
        for path in written:
            print(path)
    return 0


def watch(gen: DirectiveDocGenerator) -> int:
    # imported lazily so one-shot runs do not start observer machinery
    from .watcher import Watcher

    def regenerate(path):
        logger.info("%s changed, regenerating", path)
        # the template is reloaded too, in case it is edited alongside the source
        gen.reset_template()
        run_once(gen)

    Watcher(gen.config.source_path, regenerate).run()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='directivedocs',
        description='Generate one Markdown document per configuration directive from its docstring',
    )
    parser.add_argument('--source', default=DEFAULT_SOURCE, help=f'Python file defining the directives (default {DEFAULT_SOURCE})')
    parser.add_argument('--dest', default=DEFAULT_DEST_DIR, help=f'Output directory (default {DEFAULT_DEST_DIR})')
    parser.add_argument('--template', help='Jinja2 template file (default: bundled directive.md)')
    parser.add_argument('--prefix', default=DEFAULT_PREFIX, help='Function name prefix marking a directive')
    parser.add_argument('--date', default='', help='Value for the Date placeholder')
    parser.add_argument('--dry-run', action='store_true', help='List the files that would be written without writing them')
    parser.add_argument('--watch', action='store_true', help='Regenerate whenever the source file changes')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='-v for progress, -vv for debug output')
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    gen = DirectiveDocGenerator(build_config(args))

    status = run_once(gen)
    if not args.watch:
        return status
    try:
        return watch(gen)
    except KeyboardInterrupt:
        return 130


if __name__ == '__main__':
    sys.exit(main())
