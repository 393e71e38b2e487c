# Error kinds raised by the beam engine
"""
Every error carries the offending value in its message so that a caller
(UI, API, CLI) can show it to the user as-is.

    BeamError
    ├── InvalidGeometryError       span / section / modulus not positive
    ├── OutOfRangeInputError       position outside [0, span], start > end
    ├── DegenerateMeshError        zero-length element after de-duplication
    └── UnderconstrainedSystemError  singular reduced stiffness (mechanism)
"""


class BeamError(Exception):
    """Base class for all beam analysis failures."""
    pass


class InvalidGeometryError(BeamError, ValueError):
    pass


class OutOfRangeInputError(BeamError, ValueError):
    pass


class DegenerateMeshError(BeamError, ValueError):
    pass


class UnderconstrainedSystemError(BeamError, RuntimeError):
    """Raised when supports cannot prevent rigid-body motion."""
    pass
