"""
Pydantic schemas for the apppath API.

Defines data models for request/response objects.
"""

from typing import List, Optional, Any
from pydantic import BaseModel, Field


# ============================================================================
# API Response Models
# ============================================================================

class ApiResponse(BaseModel):
    """Base response model for all API endpoints."""
    status: str = Field(..., description="'ok' or 'error'")
    message: Optional[str] = Field(default=None, description="Human-readable message")
    error_code: Optional[str] = Field(default=None, description="Error code if status='error'")
    data: Optional[Any] = Field(default=None, description="Response payload")

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "ApiResponse":
        """Create a success response."""
        return cls(status="ok", data=data, message=message)

    @classmethod
    def error(cls, error_code: str, message: str) -> "ApiResponse":
        """Create an error response."""
        return cls(status="error", error_code=error_code, message=message, data=None)


class HealthInfo(BaseModel):
    """Health check response data."""
    version: str = Field(..., description="apppath version")
    backend: str = Field(default="fastapi", description="Backend framework name")
    platform: str = Field(..., description="Host path profile ('posix' or 'windows')")


class PathResult(BaseModel):
    """Result of a path computation."""
    path: str = Field(..., description="Computed path")
    platform: str = Field(..., description="Profile used for the computation")


class VirtualPathInfo(BaseModel):
    """Description of a parsed virtual path."""
    url: str = Field(..., description="Canonical URL form")
    scheme: str = Field(..., description="'file', 'app' or 'app-storage'")
    path: str = Field(..., description="Normalized path within the scheme")
    name: str = Field(..., description="Last path component")
    extension: str = Field(..., description="Extension from the first dot of the name")
    parent: Optional[str] = Field(default=None, description="URL of the parent, if any")
    native_path: str = Field(..., description="Path on disk under the configured directories")


class FileInfo(BaseModel):
    """Filesystem metadata for a virtual path."""
    url: str = Field(..., description="Canonical URL form")
    native_path: str = Field(..., description="Path on disk")
    exists: bool = Field(..., description="Whether the path exists")
    is_file: bool = Field(default=False, description="True for regular files")
    is_directory: bool = Field(default=False, description="True for directories")
    is_symbolic_link: bool = Field(default=False, description="True for symbolic links")
    size: Optional[int] = Field(default=None, description="Size in bytes")
    modified: Optional[str] = Field(default=None, description="ISO format modification time")


class DirectoryListing(BaseModel):
    """Entries of a directory."""
    url: str = Field(..., description="Directory URL")
    entries: List[str] = Field(default_factory=list, description="Entry URLs")


class FileContents(BaseModel):
    """UTF-8 contents of a file."""
    url: str = Field(..., description="File URL")
    text: str = Field(..., description="File contents")


# ============================================================================
# API Request Models
# ============================================================================

class NormalizeRequest(BaseModel):
    """Request body for POST /paths/normalize."""
    path: str = Field(..., description="Path to normalize")
    platform: Optional[str] = Field(
        default=None,
        description="'posix' or 'windows' (host profile if omitted)"
    )


class ResolveRequest(BaseModel):
    """Request body for POST /paths/resolve."""
    paths: List[str] = Field(..., description="Path fragments, leftmost is the base")
    platform: Optional[str] = Field(
        default=None,
        description="'posix' or 'windows' (host profile if omitted)"
    )
    cwd: Optional[str] = Field(
        default=None,
        description="Working directory to resolve against (process cwd if omitted)"
    )


class RelativeRequest(BaseModel):
    """Request body for POST /paths/relative."""
    from_path: str = Field(..., description="Starting path")
    to_path: str = Field(..., description="Destination path")
    platform: Optional[str] = Field(
        default=None,
        description="'posix' or 'windows' (host profile if omitted)"
    )
    cwd: Optional[str] = Field(
        default=None,
        description="Working directory for relative inputs (process cwd if omitted)"
    )


# ============================================================================
# Error Codes
# ============================================================================

class ErrorCode:
    """Standard error codes for the API."""
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_A_DIRECTORY = "NOT_A_DIRECTORY"
    IS_A_DIRECTORY = "IS_A_DIRECTORY"
    IO_ERROR = "IO_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @staticmethod
    def from_os_error(error: OSError) -> str:
        """Map an ``OSError`` subclass to an error code."""
        if isinstance(error, FileNotFoundError):
            return ErrorCode.NOT_FOUND
        if isinstance(error, PermissionError):
            return ErrorCode.PERMISSION_DENIED
        if isinstance(error, FileExistsError):
            return ErrorCode.ALREADY_EXISTS
        if isinstance(error, NotADirectoryError):
            return ErrorCode.NOT_A_DIRECTORY
        if isinstance(error, IsADirectoryError):
            return ErrorCode.IS_A_DIRECTORY
        return ErrorCode.IO_ERROR
