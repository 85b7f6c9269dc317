from app.interfaces.api.routes.demo import router as demo_router
from app.interfaces.api.routes.fallback import router as fallback_router
from app.interfaces.api.routes.users import router as users_router
from app.interfaces.api.routing import ForwardingRouter

api_router = ForwardingRouter()
api_router.include_router(demo_router)
api_router.include_router(users_router)
# must stay last: it matches every path
api_router.include_router(fallback_router)
