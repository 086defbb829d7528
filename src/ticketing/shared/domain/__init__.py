from .entity import Entity as Entity
from .exception import (
    BookingConfirmationException as BookingConfirmationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    FieldValidationException as FieldValidationException,
)
from .exception import (
    SessionStoreException as SessionStoreException,
)
from .exception import (
    SlotOrderException as SlotOrderException,
)
from .value_object import (
    SessionId as SessionId,
)
