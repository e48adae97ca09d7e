from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
from contextlib import asynccontextmanager

# Local imports
import config
from admission import AdmissionController
from audit import AuditLog
from errors import BookingError
from models import BookRequest, ClassCreate
from persistence import JsonSnapshotGateway

# ---------- Config ----------
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("class_booking")


# ---------- App Lifecycle ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    gateway = JsonSnapshotGateway(config.CLASSES_FILE, config.BOOKINGS_FILE)
    app.state.controller = AdmissionController.from_gateway(
        gateway, AuditLog(config.AUDIT_LOG_FILE)
    )
    logger.info("Snapshots loaded from %s and %s.", config.CLASSES_FILE, config.BOOKINGS_FILE)
    yield
    logger.info("Application shutting down.")

app = FastAPI(title="Studio Class Booking API", lifespan=lifespan)


def get_controller(request: Request) -> AdmissionController:
    return request.app.state.controller


# ---------- Responses ----------
def success_response(message: str, data, status_code: int = 201) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "data": data})


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.kind)
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "Invalid request body")


# ---------- API Endpoints ----------
@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/classes", status_code=201)
def create_class_api(req: ClassCreate, controller: AdmissionController = Depends(get_controller)):
    stored = controller.register_class(req)
    return success_response("Class created successfully", stored.model_dump(by_alias=True))


@app.post("/bookings", status_code=201)
def create_booking_api(req: BookRequest, controller: AdmissionController = Depends(get_controller)):
    result = controller.create_booking(req)
    return success_response("Booking successful", result.model_dump(by_alias=True))


# ---------- Run ----------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=config.HOST, port=config.PORT)
