import logging


LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename : str, default=None
        If given, log records are written to this file (overwriting it);
        otherwise they go to stderr.

    level : int, default=logging.INFO
        The root logger level.
    """
    kwargs = dict(format=LINE_FORMAT, datefmt=DATE_FORMAT, level=level)

    if filename is not None:
        kwargs.update(filename=filename, filemode='w')

    logging.basicConfig(**kwargs)
