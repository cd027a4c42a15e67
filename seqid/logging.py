"""
Custom logging with tracking of which sequence identifier a message is about.
"""

import logging


class IdentifierLoggerAdapter(logging.LoggerAdapter):
    """A logger adapter to automatically add contextual information to log records.

    This uses LoggerAdapter's default implementation of the "process" method to
    use the "extra" argument in the logging calls, which in turn makes these
    extra key/value pairs show up as attributes of the log records.
    """

    def __init__(self, logger, extra=None):
        if extra is None:
            extra = {}
        super().__init__(logger, extra)
        self._parse(extra)

    def _parse(self, extra):
        # for each recognized object type, coerce it to text, and grab whatever
        # identifying details are present.  Explicitly given text overrides
        # indirect values, like kwargs["line"] versus kwargs["error"].line.
        self._parse_error(extra)
        self._parse_record(extra)

    @staticmethod
    def _parse_record(extra):
        obj = extra.get("record")
        if obj:
            try:
                extra["flow_cell"] = str(obj.flow_cell_id)
                extra["lane"] = str(obj.lane)
                extra["tile"] = str(obj.tile_descriptor)
            except AttributeError:
                pass
            extra["record"] = str(obj)

    @staticmethod
    def _parse_error(extra):
        obj = extra.get("error")
        if obj:
            try:
                line = obj.line
                field = obj.field
            except AttributeError:
                extra["error"] = str(obj)
            else:
                extra["error"] = type(obj).__name__
                if field:
                    extra["field"] = str(field)
                if line is not None and "line" not in extra:
                    extra["line"] = str(line).strip()
