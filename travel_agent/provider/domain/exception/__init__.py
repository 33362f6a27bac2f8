from .exceptions import (
    ReservationNotFoundException as ReservationNotFoundException,
)
from .exceptions import (
    UpstreamException as UpstreamException,
)
from .exceptions import (
    UpstreamRejectedException as UpstreamRejectedException,
)
from .exceptions import (
    UpstreamTimeoutException as UpstreamTimeoutException,
)
from .exceptions import (
    UpstreamUnavailableException as UpstreamUnavailableException,
)
