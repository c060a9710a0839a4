r"""Stop policies deciding when a retry sequence must end."""

from __future__ import annotations

__all__ = ["AnyStop", "BaseRetryStop", "MaxAttemptStop", "MaxElapsedTimeStop", "NeverStop"]

from aretry.stop.base import BaseRetryStop
from aretry.stop.builtin import AnyStop, MaxAttemptStop, MaxElapsedTimeStop, NeverStop
