# Bot API methods, appended to {basic}{api_key}/
SEND_MESSAGE_METHOD = "sendMessage"
SEND_DOCUMENT_METHOD = "sendDocument"

# Keys read from the default section of the config file, in lookup order
CONFIG_KEY_BASE_URL = "basic"
CONFIG_KEY_API_TOKEN = "api_key"
CONFIG_KEY_RECIPIENT = "recipient"
REQUIRED_CONFIG_KEYS = (CONFIG_KEY_BASE_URL, CONFIG_KEY_API_TOKEN, CONFIG_KEY_RECIPIENT)

SUCCESS_STATUS_CODE = 200

RESPONSE_CHUNK_SIZE = 8192
