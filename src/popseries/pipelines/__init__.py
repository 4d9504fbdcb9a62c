"""src/popseries/pipelines/__init__.py"""

from .run_report import run_report

__all__ = ["run_report"]
