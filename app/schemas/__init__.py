from app.schemas.job import JobRoleCreate, JobRoleUpdate, JobRoleResponse, JobRoleSummary
from app.schemas.application import (
    ApplicationCreate, StatusUpdate, ApplicationResponse, ApplicationMutationResponse,
    CommentResponse, LogEntryResponse
)
from app.schemas.bot import BotTransitionResult, BotPassResponse, BotActivityEntry
from app.schemas.dashboard import StatusCount, DashboardStats
from app.schemas.user import UserRegister, UserResponse
