# backend/inkwell/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar todos los routers por dominio. Todos exigen un
token Bearer válido (ver deps.get_current_identity).
"""

from fastapi import APIRouter, Depends

from inkwell.api import deps
from inkwell.api.v1.endpoints import (
    appointments,
    artists,
    auth,
    clients,
    dashboard,
    inventory,
    sales,
    upload,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

api_router_v1 = APIRouter()

authenticated = [Depends(deps.get_current_identity)]

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO
# ========================================

# IDENTIDAD
api_router_v1.include_router(auth.router, prefix="/auth", tags=["Auth"])

# PANEL PRINCIPAL
api_router_v1.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"], dependencies=authenticated
)

# CLIENTES
api_router_v1.include_router(
    clients.router, prefix="/clients", tags=["Clients"], dependencies=authenticated
)

# ARTISTAS
api_router_v1.include_router(
    artists.router, prefix="/artists", tags=["Artists"], dependencies=authenticated
)

# CITAS
api_router_v1.include_router(
    appointments.router, prefix="/appointments", tags=["Appointments"], dependencies=authenticated
)

# INVENTARIO
api_router_v1.include_router(
    inventory.router, prefix="/inventory", tags=["Inventory"], dependencies=authenticated
)

# VENTAS
api_router_v1.include_router(
    sales.router, prefix="/sales", tags=["Sales"], dependencies=authenticated
)

# SUBIDA DE IMÁGENES
api_router_v1.include_router(
    upload.router, prefix="/upload", tags=["Upload"], dependencies=authenticated
)
