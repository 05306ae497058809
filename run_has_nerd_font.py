"""
PyInstaller entry point stub for has-nerd-font.

Bundles the has_nerd_font package as a standalone executable while
keeping its relative imports intact; the exit code is the detection
outcome.
"""

if __name__ == "__main__":
    import sys

    from has_nerd_font.main import main

    sys.exit(main())
