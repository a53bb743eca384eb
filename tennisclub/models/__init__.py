from tennisclub.models.surface import Surface
from tennisclub.models.court import Court
from tennisclub.models.user import User
from tennisclub.models.reservation import Reservation

# This makes the models directory a Python package and ensures all models are loaded
