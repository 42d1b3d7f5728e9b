from .sanitize import MAX_JD_LENGTH, sanitize_job_description

__all__ = ["MAX_JD_LENGTH", "sanitize_job_description"]
