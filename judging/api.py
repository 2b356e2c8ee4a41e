from fastapi import APIRouter
from judging.students.controllers.student_controller import router as student_router
from judging.judges.controllers.judge_controller import router as judge_router
from judging.events.controllers.event_controller import router as event_router
from judging.assignments.controllers.assignment_controller import router as assignment_router
from judging.projects.controllers.project_controller import router as project_router
from judging.reviews.controllers.review_controller import router as review_router
from judging.analytics.controllers.analytics_controller import router as analytics_router

api_router = APIRouter()

api_router.include_router(student_router, prefix="/student", tags=["student"])
api_router.include_router(judge_router, tags=["judge"])
api_router.include_router(event_router, prefix="/events", tags=["events"])
api_router.include_router(assignment_router, prefix="/judge_event", tags=["assignments"])
api_router.include_router(project_router, tags=["projects"])
api_router.include_router(review_router, prefix="/projects", tags=["reviews"])
api_router.include_router(analytics_router, tags=["analytics"])
