import time
from contextlib import contextmanager


@contextmanager
def performance_logging(description: str, counter: int = None, logger=None):
    start = time.time()
    try:
        yield
    finally:
        took = (time.time() - start) * 1000
        extra = ""
        if counter is not None and took > 0:
            extra = f" ({int(counter / took * 1000)}items/sec)"

        unit = "ms"
        if took < 0.1:
            took *= 1000
            unit = "us"

        msg = f"{description} took: {took:.2f}{unit}{extra}"
        if logger:
            logger.debug(msg)
        else:
            print(msg)


def format_number(value: float) -> str:
    """Render a number with six significant digits and no trailing zeros
    (printf-style `%g`)."""
    return f"{value:g}"
