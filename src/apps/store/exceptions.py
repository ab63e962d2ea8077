from django.core.exceptions import ObjectDoesNotExist


class EntityNotFound(ObjectDoesNotExist):
    """A referenced player, match, group, team or row is not in the document."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message
