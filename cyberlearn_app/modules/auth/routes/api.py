# File: cyberlearn_app/modules/auth/routes/api.py
from datetime import datetime, timezone

from flask import request, jsonify

from .. import auth_bp as blueprint
from ..services.auth_service import AuthService


@blueprint.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    user = AuthService.authenticate_admin(data.get('username'), data.get('password'))
    return jsonify({
        'success': True,
        'message': 'Login successful',
        'user': user,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })
