"""
Flask JSON API over the interaction core.

The presentation layer: it stores uploads, validates input and reflects
orchestrator state back as JSON. All interaction logic lives in the
orchestrator.
"""
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request, send_file
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pydantic import ValidationError as RequestValidationError
from werkzeug.exceptions import HTTPException
from werkzeug.utils import secure_filename

from .config import MoodAnalyzerConfig
from .exceptions import UnknownQuickReplyError
from .orchestration import InteractionOrchestrator
from .request_models import MessageRequest, PendingMessageRequest, QuickReplyRequest
from .schemas import UploadedImage
from .security import FileValidator, InputValidator, ValidationError

logger = logging.getLogger(__name__)


def _release_upload(image: UploadedImage) -> None:
    """Delete the stored upload once the session lets go of it."""
    try:
        Path(image.reference).unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to delete upload {image.reference}: {e}")


def create_app(
    config: Optional[MoodAnalyzerConfig] = None,
    orchestrator: Optional[InteractionOrchestrator] = None,
) -> Flask:
    """
    Build the Flask app.
    
    :param config: Configuration (defaults to MoodAnalyzerConfig())
    :param orchestrator: Pre-built orchestrator (tests inject one with a ManualScheduler)
    :return: Configured Flask application
    """
    config = config or (orchestrator.config if orchestrator else MoodAnalyzerConfig())
    orchestrator = orchestrator or InteractionOrchestrator(config, image_release_hook=_release_upload)
    upload_dir = Path(config.upload_dir or tempfile.mkdtemp(prefix="mood-analyzer-"))
    upload_dir.mkdir(parents=True, exist_ok=True)
    
    app = Flask(__name__)
    app.secret_key = config.secret_key or os.urandom(32).hex()
    app.config["MAX_CONTENT_LENGTH"] = FileValidator.MAX_FILE_SIZE + 1024 * 1024
    app.config["RATELIMIT_ENABLED"] = config.rate_limit_enabled
    app.extensions["mood_orchestrator"] = orchestrator
    
    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=["600 per hour", "120 per minute"],
        storage_uri="memory://",
    )
    
    def state_response(status: int = 200):
        return jsonify(orchestrator.snapshot().to_dict()), status
    
    def error_response(message: str, status: int = 400):
        return jsonify({"error": message}), status
    
    @app.route("/state", methods=["GET"])
    @limiter.exempt
    def state():
        """Current session state."""
        return state_response()
    
    @app.route("/quick-replies", methods=["GET"])
    @limiter.exempt
    def quick_replies():
        """Quick reply catalog."""
        return jsonify([
            {"index": i, "text": reply.text, "is_positive": reply.is_positive}
            for i, reply in enumerate(orchestrator.quick_replies)
        ])
    
    @app.route("/image", methods=["POST"])
    @limiter.limit("10 per minute")
    def upload_image():
        """Store an uploaded photo and hand it to the orchestrator."""
        if "image" not in request.files:
            return error_response("Missing 'image' file in form data")
        
        file = request.files["image"]
        if not file.filename:
            return error_response("Empty file")
        
        filename = secure_filename(file.filename) or "upload"
        stored_path = upload_dir / f"{uuid.uuid4().hex}{Path(filename).suffix.lower()}"
        file.save(stored_path)
        
        is_valid, error_msg = FileValidator.validate_image_file(str(stored_path))
        if not is_valid:
            stored_path.unlink(missing_ok=True)
            logger.warning(f"File validation failed: {error_msg}")
            return error_response(f"File validation failed: {error_msg}")
        
        handle = UploadedImage(
            reference=str(stored_path),
            filename=filename,
            content_type=FileValidator.content_type(str(stored_path)),
        )
        orchestrator.on_image_selected(handle)
        
        # Only one image per session; anything not accepted is discarded
        if orchestrator.uploaded_image != handle:
            stored_path.unlink(missing_ok=True)
        
        return state_response()
    
    @app.route("/image", methods=["GET"])
    @limiter.exempt
    def current_image():
        """Serve the image of the current session for preview."""
        image = orchestrator.uploaded_image
        if image is None or not Path(image.reference).exists():
            return error_response("No image uploaded", 404)
        return send_file(image.reference, mimetype=image.content_type)
    
    @app.route("/refusal/dismiss", methods=["POST"])
    def dismiss_refusal():
        orchestrator.on_refusal_dismissed()
        return state_response()
    
    @app.route("/cheer", methods=["POST"])
    def cheer():
        orchestrator.on_cheer_accepted()
        return state_response()
    
    @app.route("/cancel", methods=["POST"])
    def cancel():
        orchestrator.on_cancel()
        return state_response()
    
    @app.route("/reset", methods=["POST"])
    def reset():
        orchestrator.reset()
        return state_response()
    
    @app.route("/message/pending", methods=["POST"])
    def pending_message():
        """Track the draft message."""
        try:
            body = PendingMessageRequest.model_validate(request.get_json(silent=True) or {})
            text = InputValidator.validate_length(body.text, config.max_message_length, "Message")
        except (RequestValidationError, ValidationError) as e:
            return error_response(str(e))
        
        orchestrator.update_pending_message(text)
        return state_response()
    
    @app.route("/message", methods=["POST"])
    @limiter.limit("60 per minute")
    def message():
        """Send a free-text message."""
        try:
            body = MessageRequest.model_validate(request.get_json(silent=True) or {})
            text = InputValidator.sanitize_message(body.text, config.max_message_length)
        except (RequestValidationError, ValidationError) as e:
            logger.warning(f"Message rejected: {e}")
            return error_response(str(e))
        
        sentiment = orchestrator.on_message_sent(text)
        payload = orchestrator.snapshot().to_dict()
        payload["sentiment"] = sentiment.value if sentiment else None
        return jsonify(payload)
    
    @app.route("/quick-reply", methods=["POST"])
    @limiter.limit("60 per minute")
    def quick_reply():
        """Send a quick reply by index or polarity."""
        try:
            body = QuickReplyRequest.model_validate(request.get_json(silent=True) or {})
        except RequestValidationError as e:
            return error_response(str(e))
        
        if body.index is not None:
            try:
                orchestrator.on_quick_reply_selected(body.index)
            except UnknownQuickReplyError as e:
                return error_response(str(e), 404)
        else:
            orchestrator.on_quick_reply_clicked(body.is_positive)
        return state_response()
    
    @app.route("/joke", methods=["POST"])
    @limiter.limit("60 per minute")
    def joke():
        """Tell a joke; returns it alongside the new state."""
        text = orchestrator.on_joke_requested()
        return jsonify({"joke": text, "state": orchestrator.snapshot().to_dict()})
    
    @app.errorhandler(413)
    def too_large(_error):
        return error_response("File too large", 413)
    
    @app.errorhandler(Exception)
    def unexpected(error):
        if isinstance(error, HTTPException):
            return error
        logger.error(f"Unhandled API error: {str(error)}", exc_info=True)
        return error_response(str(error), 500)
    
    return app
