from enum import Enum


class SharpApiJobType(Enum):
    """
    Job types understood by this client.

    Each member's value is the job type identifier; ``url`` is the endpoint
    path, relative to the API base URL, that accepts submissions for it.
    """

    TTH_REVIEW_SENTIMENT = ("tth_review_sentiment", "/tth/review_sentiment")

    def __init__(self, job_type: str, url: str):
        self.job_type = job_type
        self.url = url
