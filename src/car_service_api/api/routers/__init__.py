"""
car_service_api.api.routers

HTTP routers, one module per resource.
"""
