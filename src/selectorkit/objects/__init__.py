from selectorkit.objects.json_io import from_json, get_json
from selectorkit.objects.rectangle import Rectangle

__all__ = ["Rectangle", "get_json", "from_json"]
