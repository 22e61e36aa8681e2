"""Capture of standard output and error for runtime logs."""

import io
import sys

__all__ = ["Debug"]


class Debug:
    """Redirects stdout and stderr into buffers while used as a context manager."""

    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self._saved = None

    @property
    def out_text(self):
        """Everything written to stdout so far."""
        return self.out.getvalue()

    @property
    def err_text(self):
        """Everything written to stderr so far."""
        return self.err.getvalue()

    @staticmethod
    def _reset(stream):
        stream.seek(0)
        stream.truncate(0)

    def clear_out(self):
        self._reset(self.out)

    def clear_err(self):
        self._reset(self.err)

    def clear(self):
        self.clear_out()
        self.clear_err()

    def __enter__(self):
        self._saved = (sys.stdout, sys.stderr)
        sys.stdout = self.out
        sys.stderr = self.err
        return self

    def __exit__(self, *args):
        sys.stdout, sys.stderr = self._saved
        self._saved = None
        return False