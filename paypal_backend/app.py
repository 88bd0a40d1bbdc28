# module paypal_backend.app
from paypal_backend.app_setup.factory import create_app

# App globale
app = create_app()
