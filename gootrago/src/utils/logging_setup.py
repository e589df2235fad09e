import logging

TRACE = 5  # Custom level below DEBUG, used for batch dumps
logging.addLevelName(TRACE, 'TRACE')


def setup_logging(verbose_level: int):
    """Set up logging with different verbosity levels.

    Level 0: WARNING (default)
    Level 1: INFO
    Level 2: DEBUG
    Level 3: TRACE (every batch sent to and received from the service)
    """
    level = logging.WARNING
    if verbose_level >= 3:
        level = TRACE
    elif verbose_level == 2:
        level = logging.DEBUG
    elif verbose_level == 1:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='[%(levelname)s @ %(filename)s:%(lineno)d] %(message)s'
    )

    # Keep the Google client libraries quiet unless tracing
    if level > TRACE:
        for name in ("google", "urllib3"):
            logging.getLogger(name).setLevel(max(level, logging.WARNING))
