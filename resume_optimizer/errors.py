"""Exceptions raised by the optimizer pipeline."""


class ResumeOptimizerError(Exception):
    """Base class for optimizer failures."""


class ResumeParseError(ResumeOptimizerError):
    """The resume payload could not be decoded into text. Fatal to the run."""


class ConfigurationError(ResumeOptimizerError):
    """A required setting is missing."""


class ScrapeError(ResumeOptimizerError):
    """A job page was fetched but yielded no job description."""
