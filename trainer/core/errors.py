# Role: Programmer-error exceptions. Normal user input never triggers these; they guard the phase order
# and the parts script step table.


class PhaseError(RuntimeError):
    """Raised on a phase skip/regression or an operation issued in the wrong phase."""


class ScriptTransitionError(RuntimeError):
    """Raised when the parts script tries to move between steps that are not connected."""
