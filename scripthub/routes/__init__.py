"""Routes package"""

from flask import request


def request_data():
    """Submitted fields from a JSON body or an urlencoded form"""
    if request.is_json:
        data = request.get_json(silent=True)
        if isinstance(data, dict):
            return data
    return request.form
