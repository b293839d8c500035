APP_NAME = "eventhub-api"
__version__ = "0.1.0"
