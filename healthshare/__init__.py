"""Healthshare plan matcher — questionnaire → eligible, scored, ranked cost-sharing plans."""

__version__ = "0.1.0"
