"""Execution context shared by printing, calls and comparisons."""

__all__ = ["Context", "SimpleContext", "DummyContext"]

import io


class Context:
    """Execution environment threaded through the runtime.

    The only requirement is an `output` stream that printed objects are
    written to.
    """

    @property
    def output(self):
        """(TextIO) Stream receiving printed output."""
        raise NotImplementedError(f"{self.__class__.__name__}.output not implemented")


class SimpleContext(Context):
    """Context writing to a caller supplied stream.

    Args:
        output: (TextIO) Writable text stream, like `sys.stdout`
    """

    def __init__(self, output):
        self._output = output

    @property
    def output(self):
        return self._output


class DummyContext(Context):
    """Context collecting output in memory."""

    def __init__(self):
        self._output = io.StringIO()

    @property
    def output(self):
        return self._output

    @property
    def text(self):
        """(str) Everything written so far."""
        return self._output.getvalue()
