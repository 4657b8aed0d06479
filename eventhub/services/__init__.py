from eventhub.services.user_service import UserService
from eventhub.services.event_service import EventService
from eventhub.services.registration_service import RegistrationService
from eventhub.services.employee_service import EmployeeService
from eventhub.services.feedback_service import FeedbackService
from eventhub.services.notification_service import NotificationService
