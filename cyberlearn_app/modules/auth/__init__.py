# File: cyberlearn_app/modules/auth/__init__.py
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

module_metadata = {
    'name': 'Xác thực',
    'category': 'System',
    'url_prefix': '/api',
    'enabled': True
}
