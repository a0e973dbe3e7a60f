"""
Error taxonomy for request translation, capability calls and startup
"""


class AskBridgeError(Exception):
    """Base error carrying the HTTP status it is reported with"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(AskBridgeError):
    """Invalid configuration; the listener must not start"""


class MalformedBody(AskBridgeError):
    """Request body is not valid JSON"""

    # Reported as 500 like any other generic failure.
    status_code = 500


class MissingMessages(AskBridgeError):
    """'messages' is absent, empty or not a list"""

    status_code = 400

    def __init__(self):
        super().__init__("Missing or invalid 'messages' in request body")


class MissingContent(AskBridgeError):
    """Last message has no usable 'content'"""

    status_code = 400

    def __init__(self):
        super().__init__("Missing 'content' in the last message")


class CapabilityError(AskBridgeError):
    """The ask capability failed to produce an answer"""

    status_code = 500
