"""Audit pipeline modules: fetcher, rules, evaluator, report and audit."""
