from typing import Optional, Dict, Any

class JobAppBaseError(Exception):
    """
    Top-level exception for the JobApp project.
    Every custom exception should inherit from this class.

    Attributes:
        code (str): Error identifier (e.g. 'CONF_ERROR')
        message (str): Human readable message
        details (Optional[Dict[str, Any]]): Extra debugging information
    """
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code}] {message}")

class ConfigurationError(JobAppBaseError):
    """Raised when loading or validating settings fails"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONF_ERROR", message=message, details=details)
