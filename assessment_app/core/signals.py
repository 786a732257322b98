"""
Central Signal Registry.

Uses blinker to decouple grading from the modules that react to it.

Usage:
    # Publisher (sender)
    from assessment_app.core.signals import submission_graded
    submission_graded.send(None, result=result, client_info=client_info)

    # Subscriber (receiver) - in module's events.py
    @submission_graded.connect
    def on_submission_graded(sender, **kwargs):
        ...
"""
from blinker import Namespace

assessment_signals = Namespace()

# Signal: Fired after a submission has been graded and the response is ready
# Payload: result (SubmissionResult), client_info (ClientInfo)
submission_graded = assessment_signals.signal('submission_graded')
