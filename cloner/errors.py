from pathlib import Path
from typing import Optional

class ClonerError(Exception):
    """Base for every failure that aborts a clone run"""
    
    exit_code: int = 1
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Set by the pipeline once the destination directory has been created
        self.partial_destination: Optional[Path] = None

class UnknownChain(ClonerError):
    exit_code = 3

class DestinationExists(ClonerError):
    exit_code = 4

class ScaffoldError(ClonerError):
    exit_code = 5

class NetworkError(ClonerError):
    exit_code = 6

class MalformedEnvelope(ClonerError):
    """Explorer response is not a JSON object with a non-empty result array"""
    exit_code = 7

class MissingSourceCode(ClonerError):
    exit_code = 8

class MalformedSourceObject(ClonerError):
    exit_code = 9

class MissingSources(ClonerError):
    exit_code = 10

class MissingContent(ClonerError):
    exit_code = 11

class UnsupportedSingleFileFormat(ClonerError):
    """Contract was verified as one flat file, not as Standard JSON"""
    exit_code = 12

class FileSystemError(ClonerError):
    exit_code = 13

class InvalidSourcePath(ClonerError):
    """Source key would land outside the project's src/ directory"""
    exit_code = 14
