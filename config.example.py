# -*- coding: utf-8 -*-
"""
Configuration file for the ScriptHub site

IMPORTANT: Copy this file to config.py and fill in your actual values
DO NOT commit config.py to Git!
Values set here win over environment variables and .env
"""

# Server
HOST = "0.0.0.0"
PORT = 3000

# Session signing secret
SECRET_KEY = "change-me"

# Admin credentials
ADMIN_USER = "admin"
ADMIN_PASS = "change-me-too"

# Database directory (the file is <DB_DIR>/data.db unless DB_FILE is set)
DB_DIR = "db"

# Categories created on first boot
DEFAULT_CATEGORIES = ["Combat", "Utilidades", "Teleport", "UI", "Misceláneo"]
