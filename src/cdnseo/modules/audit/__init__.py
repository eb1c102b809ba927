"""Audit module - ties the fetcher, evaluator and reporter together."""

from .auditor import Auditor, run_audit

__all__ = ["Auditor", "run_audit"]
