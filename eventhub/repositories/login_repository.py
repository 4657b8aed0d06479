from datetime import datetime, timezone
from typing import Optional
from eventhub.extensions import db
from eventhub.models import LoginRecord


class LoginRepository:
    @staticmethod
    def open_session(user_id: int) -> LoginRecord:
        record = LoginRecord(user_id=user_id, login_time=datetime.now(timezone.utc))
        db.session.add(record)
        db.session.commit()
        return record

    @staticmethod
    def find_latest_open(user_id: int) -> Optional[LoginRecord]:
        return (
            LoginRecord.query.filter(
                LoginRecord.user_id == user_id, LoginRecord.logout_time.is_(None)
            )
            .order_by(LoginRecord.login_time.desc(), LoginRecord.id.desc())
            .first()
        )

    @staticmethod
    def close_session(record: LoginRecord) -> LoginRecord:
        record.logout_time = datetime.now(timezone.utc)
        db.session.commit()
        return record
