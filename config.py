"""
config.py — Application settings
================================
Loaded by main.create_app() via app.config.from_object(), then
overridden from the environment with the ALGOVIZ_ prefix:

    ALGOVIZ_MAX_ARRAY_SIZE=500 ALGOVIZ_LOG_LEVEL=DEBUG flask --app main run

Values from the environment are parsed as JSON where possible, so
numbers and booleans come through typed.
"""


class Config:
    DEBUG = False
    TESTING = False
    LOG_LEVEL = "INFO"

    HOST = "127.0.0.1"
    PORT = 5000

    # generation is synchronous, so inputs are capped
    DEFAULT_ARRAY_SIZE = 20
    MAX_ARRAY_SIZE = 300
    ELEMENT_MIN_VALUE = 10
    ELEMENT_MAX_VALUE = 309
    MAX_GRAPH_NODES = 300
    MAX_TREE_NODES = 300
    MAX_LIST_NODES = 300


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
    MAX_ARRAY_SIZE = 50
