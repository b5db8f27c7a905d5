# Importar todos los modelos para que Base.metadata los registre
from inkwell.db.models.user_model import User
from inkwell.db.models.client_model import Client
from inkwell.db.models.artist_model import Artist
from inkwell.db.models.appointment_model import Appointment
from inkwell.db.models.inventory_model import InventoryItem
from inkwell.db.models.sale_model import Sale

__all__ = ["User", "Client", "Artist", "Appointment", "InventoryItem", "Sale"]
