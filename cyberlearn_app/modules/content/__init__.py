# File: cyberlearn_app/modules/content/__init__.py
from flask import Blueprint

content_bp = Blueprint('content', __name__)

module_metadata = {
    'name': 'Nội dung',
    'category': 'Learning',
    'url_prefix': '/api',
    'enabled': True
}
