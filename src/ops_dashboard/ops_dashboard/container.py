from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.service import AttendanceService
from .attendance.store_repository import StoreAttendanceRepository
from .cascade.service import CascadeDeleteService
from .core.constants import (
    ALL_COLLECTIONS,
    ATTENDANCE,
    DEFAULT_CASCADE_WORKERS,
    DEFAULT_DAY_RATE,
    DEFAULT_SESSION_HOURS,
    EMPLOYEES,
    MEMBERSHIP_MEMBERS,
    OTHER_EXPENSES,
    PENDING_WORKS,
    UPADS,
)
from .dashboard.service import DashboardService
from .database.accessor import CollectionAccessor
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import InMemoryDocumentStore
from .database.mongo_store import MongoDocumentStore
from .database.store import DocumentStore
from .employees.service import EmployeeService
from .employees.store_repository import StoreEmployeeRepository
from .expenses.repository import StoreExpenseRepository
from .expenses.service import ExpenseService
from .images.cloudinary_store import CloudinaryConfig, CloudinaryImageStore
from .images.store import ImageStore
from .members.service import MemberService
from .members.store_repository import StoreMemberRepository
from .payroll.calculator.standard_calculator import DayRateSalaryCalculator
from .payroll.repository import StoreUpadRepository
from .payroll.service import PayrollService
from .users.service import AuthService
from .works.service import InquiryService, PendingWorkService
from .works.store_repository import StorePendingWorkRepository


@dataclass(frozen=True)
class Container:
    store: DocumentStore
    images: ImageStore
    accessors: dict[str, CollectionAccessor]

    works_repo: StorePendingWorkRepository
    members_repo: StoreMemberRepository
    employees_repo: StoreEmployeeRepository
    attendance_repo: StoreAttendanceRepository
    upads_repo: StoreUpadRepository
    expenses_repo: StoreExpenseRepository

    auth_service: AuthService
    cascade_service: CascadeDeleteService
    inquiry_service: InquiryService
    work_service: PendingWorkService
    member_service: MemberService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    expense_service: ExpenseService
    dashboard_service: DashboardService


def build_store(settings: Any) -> DocumentStore:
    backend = str(getattr(settings, "STORE_BACKEND", "mongo")).lower()
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend != "mongo":
        raise ValueError(f"Unknown STORE_BACKEND: {backend}")
    conn = DatabaseConnection.get_instance(
        DBConfig(uri=str(settings.MONGO_URI), database=str(settings.MONGO_DB_NAME))
    )
    return MongoDocumentStore(conn)


def build_image_store(settings: Any) -> ImageStore:
    return CloudinaryImageStore(
        CloudinaryConfig(
            cloud_name=str(getattr(settings, "CLOUDINARY_CLOUD_NAME", "") or ""),
            upload_preset=str(getattr(settings, "CLOUDINARY_UPLOAD_PRESET", "") or ""),
            api_key=getattr(settings, "CLOUDINARY_API_KEY", None) or None,
            api_secret=getattr(settings, "CLOUDINARY_API_SECRET", None) or None,
        )
    )


def build_container(
    *,
    settings: Any,
    store: Optional[DocumentStore] = None,
    images: Optional[ImageStore] = None,
) -> Container:
    store = store or build_store(settings)
    images = images or build_image_store(settings)
    accessors = {name: CollectionAccessor(store, name) for name in ALL_COLLECTIONS}

    works_repo = StorePendingWorkRepository(accessors[PENDING_WORKS])
    members_repo = StoreMemberRepository(accessors[MEMBERSHIP_MEMBERS])
    employees_repo = StoreEmployeeRepository(accessors[EMPLOYEES])
    attendance_repo = StoreAttendanceRepository(accessors[ATTENDANCE])
    upads_repo = StoreUpadRepository(accessors[UPADS])
    expenses_repo = StoreExpenseRepository(accessors[OTHER_EXPENSES])

    calculator = DayRateSalaryCalculator(float(getattr(settings, "DAY_RATE", DEFAULT_DAY_RATE)))

    auth_service = AuthService.from_settings(
        username=str(getattr(settings, "ADMIN_USERNAME", "admin")),
        password_hash=str(getattr(settings, "ADMIN_PASSWORD_HASH", "") or ""),
        password=str(getattr(settings, "ADMIN_PASSWORD", "") or ""),
        max_age_hours=float(getattr(settings, "SESSION_MAX_AGE_HOURS", DEFAULT_SESSION_HOURS)),
    )
    cascade_service = CascadeDeleteService(
        employees=employees_repo,
        attendance=attendance_repo,
        members=members_repo,
        works=works_repo,
        images=images,
        max_workers=int(getattr(settings, "CASCADE_WORKERS", DEFAULT_CASCADE_WORKERS)),
    )

    return Container(
        store=store,
        images=images,
        accessors=accessors,
        works_repo=works_repo,
        members_repo=members_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        upads_repo=upads_repo,
        expenses_repo=expenses_repo,
        auth_service=auth_service,
        cascade_service=cascade_service,
        inquiry_service=InquiryService(works_repo, members_repo),
        work_service=PendingWorkService(works_repo, cascade_service),
        member_service=MemberService(members_repo),
        employee_service=EmployeeService(employees_repo, images, cascade_service),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        payroll_service=PayrollService(attendance_repo, upads_repo, employees_repo, calculator=calculator),
        expense_service=ExpenseService(expenses_repo, works_repo, attendance_repo, calculator=calculator),
        dashboard_service=DashboardService(
            employees=employees_repo,
            works=works_repo,
            attendance=attendance_repo,
            expenses=expenses_repo,
            calculator=calculator,
        ),
    )
