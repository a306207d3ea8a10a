"""Contains the name for the logger of DualKit modules.

``dualkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
The library itself only emits ``WARNING`` records, for example when the
Nelder-Mead optimizer reaches its iteration cap before the simplex has
converged, or when the initial simplex is degenerate.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``dualkit.logger.dualkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "dualkit"
dualkit_logger = logging.getLogger(logger_name)
