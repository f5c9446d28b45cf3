from typing import Any, Optional

# Arbitrary key-value document (inventory variables, extra vars, job results)
Document = dict[str, Any]

def as_document(value: Any) -> Optional[Document]:
    """Returns the value when it is a JSON object, otherwise None."""
    if isinstance(value, dict):
        return value
    return None
