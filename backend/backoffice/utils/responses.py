from __future__ import annotations
"""Uniform JSON envelope shared by every endpoint.

Success: {"status": 200, "message": "...", "data": {...}}  (data omitted when None)
Failure: {"status": <code>, "message": "...", "errors": {...}}
"""
from typing import Any, Dict, Optional
from flask import jsonify


def success(message: str, data: Optional[Dict[str, Any]] = None, status: int = 200):
    body: Dict[str, Any] = {'status': status, 'message': message}
    if data is not None:
        body['data'] = data
    return jsonify(body), status


def error_response(status: int, message: str, errors: Optional[Dict[str, Any]] = None):
    return jsonify({'status': status, 'message': message, 'errors': errors or {}}), status

__all__ = ['success', 'error_response']
