"""
wfparams Command-Line Interface entry point.

Provides the main() function behind the ``wfparams`` console script: it
parses the arguments, dispatches to the command handler and maps failures
to exit codes (0 success, 1 error, 130 interrupted).
"""


def main(argv=None):
    """
    Main entry point for the wfparams CLI.
    """
    import sys

    from wfparams.cli.exit_codes import ExitCode
    from wfparams.core.exceptions import WFParamsError

    from wfparams.cli.argument_parser import CLIParser

    try:
        parser = CLIParser()
        args = parser.parse_args(argv)

        if hasattr(args, 'func'):
            return int(args.func(args))
        else:
            parser.parser.print_help()
            return int(ExitCode.FAILURE)

    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user", file=sys.stderr)
        return int(ExitCode.INTERRUPTED)
    except (WFParamsError, FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return int(ExitCode.FAILURE)
    except Exception as e:  # noqa: BLE001
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        return int(ExitCode.FAILURE)


if __name__ == "__main__":
    import sys
    sys.exit(main())
