"""Contains the name for the logger of PolyKit modules.

``polykit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Only messages of level ``WARNING`` are emitted, for example when a
polynomial is built from non-finite coefficients or when a persisted
polynomial carries keys that are ignored on restore.

Evaluation itself never logs. Calling applications can configure the
format and log level of the displayed messages by
`Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``polykit.logger.polykit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.WARNING,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "polykit"
polykit_logger = logging.getLogger(logger_name)
