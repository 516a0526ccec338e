# Database models
from .donor import Donor
from .admin import Admin
from .blood_inventory import BloodInventory, BloodType, BLOOD_TYPES
from .blood_request import BloodRequest
from .nid_verification_log import NidVerificationLog
