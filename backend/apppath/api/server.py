"""
FastAPI server for apppath.

Provides REST API endpoints for:
- Health check
- Path normalization, resolution and relative paths (either profile)
- Virtual path inspection
- Read-only file access through virtual paths
"""

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .schemas import (
    ApiResponse, HealthInfo, ErrorCode,
    NormalizeRequest, ResolveRequest, RelativeRequest, PathResult,
    VirtualPathInfo, FileInfo, DirectoryListing, FileContents
)
from ..config import DirectoriesConfig, get_config
from ..core.profiles import get_profile, host_profile
from ..core.relative import relative
from ..core.resolver import normalize, resolve
from ..core.virtual_path import VirtualPath
from ..io import file_ops
from ..utils.logging_utils import setup_logging, get_logger
from .. import __version__


logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = get_config()
    setup_logging(level=config.logging.level, log_file=config.logging.file)
    logger.info(f"apppath backend v{__version__} starting...")
    logger.info(f"Installation directory: {config.directories.installation_dir}")
    logger.info(f"Storage directory: {config.directories.storage_dir}")
    yield
    logger.info("apppath backend shutting down...")


app = FastAPI(
    title="apppath",
    description="Virtual path resolution over the filesystem and application directories",
    version=__version__,
    lifespan=lifespan
)

# Add CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_directories() -> DirectoriesConfig:
    """Directories used to map virtual schemes onto disk."""
    return get_config().directories


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health", response_model=ApiResponse)
async def health_check():
    """Health check endpoint."""
    return ApiResponse.ok(
        data=HealthInfo(
            version=__version__,
            backend="fastapi",
            platform=host_profile().name
        ),
        message="apppath backend alive"
    )


# ============================================================================
# Path Algebra
# ============================================================================

@app.post("/paths/normalize", response_model=ApiResponse)
async def normalize_endpoint(request: NormalizeRequest):
    """Normalize a path, collapsing dot segments and redundant separators."""
    try:
        profile = get_profile(request.platform)
    except ValueError as e:
        return ApiResponse.error(ErrorCode.INVALID_INPUT, str(e))

    return ApiResponse.ok(
        data=PathResult(path=normalize(request.path, profile), platform=profile.name)
    )


@app.post("/paths/resolve", response_model=ApiResponse)
async def resolve_endpoint(request: ResolveRequest):
    """Resolve path fragments into one absolute path."""
    try:
        profile = get_profile(request.platform)
    except ValueError as e:
        return ApiResponse.error(ErrorCode.INVALID_INPUT, str(e))

    resolved = resolve(*request.paths, profile=profile, cwd=request.cwd)
    return ApiResponse.ok(data=PathResult(path=resolved, platform=profile.name))


@app.post("/paths/relative", response_model=ApiResponse)
async def relative_endpoint(request: RelativeRequest):
    """Compute the relative path between two paths."""
    try:
        profile = get_profile(request.platform)
    except ValueError as e:
        return ApiResponse.error(ErrorCode.INVALID_INPUT, str(e))

    result = relative(request.from_path, request.to_path, profile=profile, cwd=request.cwd)
    return ApiResponse.ok(data=PathResult(path=result, platform=profile.name))


@app.get("/paths/info", response_model=ApiResponse)
async def path_info_endpoint(
    url: str = Query(..., description="file:, app: or app-storage: URL, or a bare path"),
    directories: DirectoriesConfig = Depends(get_directories)
):
    """Parse a virtual path and describe it."""
    file = VirtualPath(url)
    parent = file.parent
    return ApiResponse.ok(
        data=VirtualPathInfo(
            url=file.url,
            scheme=file.scheme.value,
            path=file.path,
            name=file.name,
            extension=file.extension,
            parent=parent.url if parent is not None else None,
            native_path=file_ops.to_native_path(file, directories)
        )
    )


# ============================================================================
# File Access
# ============================================================================

@app.get("/files/info", response_model=ApiResponse)
async def file_info_endpoint(
    url: str = Query(..., description="Virtual path URL"),
    directories: DirectoriesConfig = Depends(get_directories)
):
    """Filesystem metadata for a virtual path."""
    file = VirtualPath(url)
    try:
        info = FileInfo(
            url=file.url,
            native_path=file_ops.to_native_path(file, directories),
            exists=file_ops.exists(file, directories),
            is_symbolic_link=file_ops.is_symbolic_link(file, directories)
        )
        if info.exists:
            info.is_file = file_ops.is_file(file, directories)
            info.is_directory = file_ops.is_directory(file, directories)
            info.size = file_ops.size(file, directories)
            info.modified = file_ops.modification_date(file, directories).isoformat()
        return ApiResponse.ok(data=info)

    except OSError as e:
        return ApiResponse.error(ErrorCode.from_os_error(e), str(e))


@app.get("/files/list", response_model=ApiResponse)
async def list_directory_endpoint(
    url: str = Query(..., description="Directory URL"),
    directories: DirectoriesConfig = Depends(get_directories)
):
    """List the entries of a directory."""
    file = VirtualPath(url)
    try:
        entries = file_ops.directory_listing(file, directories)
        return ApiResponse.ok(
            data=DirectoryListing(url=file.url, entries=[e.url for e in entries])
        )

    except OSError as e:
        return ApiResponse.error(ErrorCode.from_os_error(e), str(e))


@app.get("/files/read", response_model=ApiResponse)
async def read_file_endpoint(
    url: str = Query(..., description="File URL"),
    directories: DirectoriesConfig = Depends(get_directories)
):
    """Read a file as UTF-8 text."""
    file = VirtualPath(url)
    try:
        text = file_ops.read_utf8(file, directories)
        return ApiResponse.ok(data=FileContents(url=file.url, text=text))

    except OSError as e:
        return ApiResponse.error(ErrorCode.from_os_error(e), str(e))

    except UnicodeDecodeError as e:
        return ApiResponse.error(ErrorCode.INVALID_INPUT, f"File is not UTF-8: {e}")


# ============================================================================
# Error Handlers
# ============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for uncaught exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ApiResponse.error(
            ErrorCode.INTERNAL_ERROR,
            f"Internal server error: {str(exc)}"
        ).model_dump()
    )
