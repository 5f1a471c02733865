"""Filter out known non-critical warnings."""

import sys
import warnings

# Noise printed by gevent worker threads when pyinfra runs against @local
# or inside a container.
_SUPPRESSED_FRAGMENTS = (
    "_DummyThread' object has no attribute '_handle'",
    "Exception ignored in:",
    "_after_fork",
    "assert len(active) == 1",
)


class FilteredStderr:
    def __init__(self, original):
        self.original = original

    def write(self, text):
        if any(fragment in text for fragment in _SUPPRESSED_FRAGMENTS):
            return 0
        return self.original.write(text)

    def flush(self):
        self.original.flush()

    def __getattr__(self, name):
        return getattr(self.original, name)


def suppress_known_warnings() -> None:
    warnings.filterwarnings("ignore", category=ResourceWarning)
    warnings.filterwarnings("ignore", category=DeprecationWarning)

    if isinstance(sys.stderr, FilteredStderr):
        return
    sys.stderr = FilteredStderr(sys.stderr)


# Auto-apply when imported
suppress_known_warnings()
