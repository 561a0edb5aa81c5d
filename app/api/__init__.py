"""
API module — HTTP endpoints of the feedback relay.
"""
from app.api.feedback import create_feedback_app

__all__ = ["create_feedback_app"]
