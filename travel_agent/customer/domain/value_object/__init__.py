from .customer_id import CustomerId as CustomerId
from .email_address import EmailAddress as EmailAddress
