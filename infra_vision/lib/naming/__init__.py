from .abbreviations import ABBREVIATIONS
from .derive_name import derive_name
from .resource_token import resource_token, RESOURCE_TOKEN_LENGTH
