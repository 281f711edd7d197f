"""
ShopRite Deals API

Flask front end for DealsService.

    GET /shoprite-deals?store=641&category=meat-id-520692&limit=10&subcategory=Beef

Query parameters:
    store        Store ID (required)
    category     Category slug (required)
    limit        Max number of products (optional, default 20)
    subcategory  Restrict to one subcategory (optional)
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ..common.config_loader import Settings
from ..common.text_utils import parse_leading_int
from .service import DealsService

logger = logging.getLogger(__name__)


def _parse_limit(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    limit = parse_leading_int(raw, None)
    if limit is None:
        logger.warning("Ignoring non-numeric limit %r", raw)
        return default
    return limit


def create_app(
    service: Optional[DealsService] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """
    Build the Flask app.

    Args:
        service: Deals service to serve from (default: one with an in-process cache)
        settings: Runtime settings, used when no service is given
    """
    settings = settings or (service.settings if service else Settings())
    service = service or DealsService(settings=settings)

    app = Flask(__name__)
    app.json.compact = False
    app.json.sort_keys = False
    app.extensions["deals_service"] = service

    CORS(app,
         resources={r"/*": {"origins": "*"}},
         send_wildcard=True,
         methods=["GET", "OPTIONS"],
         allow_headers=["Content-Type"])

    @app.route("/shoprite-deals", methods=["GET"])
    def shoprite_deals():
        try:
            store = request.args.get("store")
            category = request.args.get("category")
            subcategory = request.args.get("subcategory")
            limit = _parse_limit(request.args.get("limit"), settings.default_limit)

            if not store or not category:
                return jsonify({"error": "Missing required parameters: store and category"}), 400

            body, status = service.get_deals(store, category, subcategory, limit)
            if status != 200:
                return jsonify(body), status

            response = jsonify(body)
            response.headers["Cache-Control"] = f"public, max-age={settings.response_cache_ttl}"
            return response

        except Exception as e:
            logger.exception("Deals request failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"ok": True})

    return app
