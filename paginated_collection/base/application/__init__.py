from .paginated_collection import *  # NOQA
