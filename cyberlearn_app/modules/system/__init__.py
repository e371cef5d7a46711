# File: cyberlearn_app/modules/system/__init__.py
from flask import Blueprint, jsonify

system_bp = Blueprint('system', __name__)

module_metadata = {
    'name': 'Hệ thống',
    'category': 'System',
    'url_prefix': None,
    'enabled': True
}


@system_bp.route('/health', methods=['GET'])
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})
