"""
Pydantic models for SharpAPI response bodies.
"""

from pydantic import BaseModel, ConfigDict


class JobSubmission(BaseModel):
    """
    Body returned by SharpAPI right after a job is accepted.
    ``status_url`` is polled later for the job's result.
    """

    model_config = ConfigDict(extra="ignore")

    status_url: str
    job_id: str | None = None
