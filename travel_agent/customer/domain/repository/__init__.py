from .customer_repository import CustomerRepository as CustomerRepository
