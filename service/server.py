import os
from flask import Flask, jsonify, request
from flask_cors import CORS
import config
from sharerecon import ShareRecoveryError, create_commitment, parse_share_document
from service.reconstruction_tracker import ReconstructionTracker


def _flag(name, default):
    value = request.args.get(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def create_app(tracker=None):
    app = Flask(__name__)
    CORS(app)
    tracker = tracker or ReconstructionTracker()

    def failure(reconstruction_id, error):
        tracker.log_failure(reconstruction_id, error)
        return jsonify({
            "reconstruction_id": reconstruction_id,
            "error": str(error),
            "type": type(error).__name__
        }), 400

    @app.route('/reconstruct', methods=['POST'])
    def reconstruct_secret():
        reconstruction_id = os.urandom(8).hex()
        body = request.get_data(as_text=True)
        strict = _flag("strict", config.Config.STRICT_DECODING)
        cross_check = _flag("cross_check", config.Config.CROSS_CHECK_SHARES)

        try:
            share_set = parse_share_document(body, strict=strict)
        except ShareRecoveryError as e:
            return failure(reconstruction_id, e)

        tracker.log_start(reconstruction_id, share_set.required_count, share_set.point_count)
        try:
            secret = share_set.reconstruct(cross_check=cross_check)
        except ShareRecoveryError as e:
            return failure(reconstruction_id, e)

        commitment = create_commitment(secret)
        tracker.log_success(reconstruction_id, commitment)
        return jsonify({
            "reconstruction_id": reconstruction_id,
            "secret": str(secret),
            "commitment": commitment,
            "points_used": share_set.required_count
        })

    @app.route('/audit/<reconstruction_id>', methods=['GET'])
    def reconstruction_audit(reconstruction_id):
        log = tracker.get_log(reconstruction_id)
        if log:
            return jsonify(log)
        return jsonify({"error": "Reconstruction not found"}), 404

    @app.route('/status', methods=['GET'])
    def status():
        return jsonify({
            "status": "active",
            "reconstructions": tracker.count()
        })

    return app


if __name__ == '__main__':
    create_app().run(
        host=config.Config.SERVER_HOST,
        port=config.Config.SERVER_PORT,
        threaded=True
    )
