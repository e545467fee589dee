import sys

from .core.app_initializer import initialize_app
from .core.argument_parser import parse_arguments
from .errors import AtwgenError
from .logging_utils import get_logger

# Get logger instance
logger = get_logger(__name__)

def main(argv=None):
    """Main entry point for the application.

    This is the only place errors are reported: any failure is logged once and
    the process exits with status 1.
    """
    args = parse_arguments(argv)
    try:
        job = initialize_app(args)
        run_app(job)
    except AtwgenError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error in main: {e}", exc_info=True)
        sys.exit(1)

def run_app(job):
    """Render the comic described by ``job`` and write it to disk.

    Args:
        job: RenderJob from initialize_app
    """
    overlay = job.create_overlay()
    logger.debug("Starting render...")
    overlay.render_files(job.assets, job.captions, job.background_placement)
    logger.info("Done")

if __name__ == '__main__':
    main()
