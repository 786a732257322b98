"""
Event Handlers for Notification Module.

Listens to ``submission_graded`` and emails the report to the administrator.
Delivery runs in a background thread so the submitting client never waits on
it, and its failures never reach the HTTP response.
"""
import threading

from flask import current_app

from assessment_app.core.signals import submission_graded
from .services.delivery_service import DeliveryService, NotificationDispatchError
from .services.report_service import build_report


def deliver_submission_report(app, result, client_info):
    """Build and send one report. Single attempt; errors are logged only."""
    with app.app_context():
        try:
            report = build_report(result, client_info, app.config)
            DeliveryService.send_report(report, app.config)
        except NotificationDispatchError as e:
            app.logger.error(f"[Notification] Email send failed: {e}")
        except Exception as e:
            app.logger.error(f"[Notification] Error building or sending report: {e}", exc_info=True)


@submission_graded.connect
def on_submission_graded(sender, **kwargs):
    """
    Dispatch the email report for a graded submission.

    Expected kwargs:
        - result: SubmissionResult
        - client_info: ClientInfo
    """
    app = current_app._get_current_object()
    config = app.config

    if not config.get('NOTIFICATION_ENABLED'):
        app.logger.debug("[Notification] Disabled; skipping report email.")
        return

    missing = DeliveryService.missing_settings(config)
    if missing:
        app.logger.warning(f"[Notification] {', '.join(missing)} not set; skipping email.")
        return

    args = (app, kwargs.get('result'), kwargs.get('client_info'))
    if not config.get('NOTIFICATION_ASYNC', True):
        deliver_submission_report(*args)
        return

    thread = threading.Thread(target=deliver_submission_report, args=args, daemon=True)
    thread.start()
