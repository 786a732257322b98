from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionReport:
    """Email-ready summary of one graded submission."""
    sender: str
    recipient: str
    subject: str
    html_body: str
    text_body: str
