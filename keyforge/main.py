"""KeyForge entrypoint."""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger("keyforge")


def main():
    """Application entry point."""
    # 1. Check dependencies
    from keyforge import check_dependencies

    check_dependencies()

    # 2. Check for display (Linux headless detection)
    if sys.platform.startswith("linux"):
        if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY"):
            print(
                "ERROR: No display found ($DISPLAY / $WAYLAND_DISPLAY not set).\n"
                "KeyForge requires a graphical environment.",
                file=sys.stderr,
            )
            sys.exit(1)

    # 3. Resolve data directory
    from keyforge.paths import get_data_dir

    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)

    # 4. Initialise logging
    from keyforge.logging_setup import setup_secure_logging

    setup_secure_logging(data_dir)

    # 5. Load remembered generator options
    from keyforge.config import Settings

    settings = Settings.load(data_dir)

    # 6. Launch GUI
    app = None
    try:
        from keyforge.ui.app import KeyForgeApp

        app = KeyForgeApp(settings=settings, data_dir=data_dir)
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception as exc:
        logger.critical("Critical error: %s", exc)
        raise
    finally:
        if app is not None:
            try:
                app.session.close()
            except Exception as exc:
                logger.error("Error closing session: %s", exc)


if __name__ == "__main__":
    main()
