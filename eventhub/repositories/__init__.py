from eventhub.repositories.user_repository import UserRepository
from eventhub.repositories.login_repository import LoginRepository
from eventhub.repositories.event_repository import EventRepository
from eventhub.repositories.registration_repository import RegistrationRepository
from eventhub.repositories.notification_repository import NotificationRepository
from eventhub.repositories.employee_repository import EmployeeRepository, AssignmentRepository
from eventhub.repositories.feedback_repository import FeedbackRepository
