"""Feature modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()

MODULES_DIR = Path(__file__).parent


def _module_names() -> list[str]:
    return [
        path.name
        for path in sorted(MODULES_DIR.iterdir())
        if path.is_dir() and not path.name.startswith("_") and (path / "__init__.py").exists()
    ]


def discover_modules() -> list[APIRouter]:
    """Auto-discover and return routers from all modules.

    This function scans the modules directory for subdirectories
    that ship a ``routes`` submodule exposing a ``router``.

    Returns:
        List of FastAPI routers from discovered modules.
    """
    routers: list[APIRouter] = []

    for name in _module_names():
        if not (MODULES_DIR / name / "routes.py").exists():
            continue
        module = import_module(f"leadbooth.modules.{name}.routes")
        if hasattr(module, "router"):
            routers.append(module.router)
            logger.debug("module_loaded", module=name)

    return routers


def import_models() -> None:
    """Import every module's ORM models so the metadata is complete.

    Used by Alembic and the test suite before touching ``Base.metadata``.
    """
    for name in _module_names():
        if (MODULES_DIR / name / "models.py").exists():
            import_module(f"leadbooth.modules.{name}.models")
