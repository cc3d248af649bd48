from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.repos.user_repo import UserRepo
from storefront.domain.schemas import UserRegister, UserLogin, UserRead
from storefront.domain.errors import DuplicateEmail, InvalidCredentials
from storefront.services.password_service import hash_password, verify_password
from storefront.services.token_service import TokenService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session, token_service: TokenService):
        self.repo = UserRepo(db)
        self.token_service = token_service

    def register(self, payload: UserRegister) -> UserRead:
        if self.repo.get_user_by_email(payload.email):
            raise DuplicateEmail()

        user = UserModel(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password),
        )

        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            #wyscig dwoch rejestracji - unique index na email
            self.repo.rollback()
            raise DuplicateEmail()

        logger.info(f"Registered user {created.id}")
        return UserRead.model_validate(created)

    def login(self, payload: UserLogin) -> str:
        user = self.repo.get_user_by_email(payload.email)

        #ten sam blad dla nieznanego maila i zlego hasla
        if not user or not verify_password(payload.password, user.password):
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return self.token_service.issue(user.id)

