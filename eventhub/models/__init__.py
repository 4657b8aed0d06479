from eventhub.models.user import User, Admin, Attendee, Organizer
from eventhub.models.event import Event
from eventhub.models.registration import Registration
from eventhub.models.employee import Employee, Assignment
from eventhub.models.feedback import Feedback
from eventhub.models.notification import Notification
from eventhub.models.login_record import LoginRecord
from eventhub.models.enums import EventStatus
