# core/exceptions.py

class DCSimError(Exception):
    """Base exception for DCSim errors."""
    pass

class ParameterError(DCSimError):
    """Raised when a component is constructed with invalid parameters."""
    pass

class NetlistError(DCSimError):
    """Raised when a netlist file cannot be read or fails validation."""
    pass

class SingularMatrixError(DCSimError):
    """Raised when a linear system has no unique solution."""
    pass

class AnalysisError(DCSimError):
    """Base class for failures of a single circuit analysis."""
    pass

class ConfigurationError(AnalysisError):
    """Raised when the requested ground node is not part of the circuit."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f'Ground node "{node_id}" not found in circuit.')

class UnsolvableSystemError(AnalysisError):
    """Raised when the assembled MNA system is singular."""
    pass
