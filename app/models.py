from datetime import date
from sqlalchemy import Column, String, Integer, Date, DECIMAL, ForeignKey, Table, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db import Base

# tablas de relación: conjuntos de pares de ids
employee_projects = Table(
    "employee_projects",
    Base.metadata,
    Column("employee_id", ForeignKey("employees.id"), primary_key=True),
    Column("project_id", ForeignKey("projects.id"), primary_key=True),
)

employee_technologies = Table(
    "employee_technologies",
    Base.metadata,
    Column("employee_id", ForeignKey("employees.id"), primary_key=True),
    Column("technology_id", ForeignKey("technologies.id"), primary_key=True),
)

class Role(Base):
    __tablename__ = "roles"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    min_salary: Mapped[float] = mapped_column(DECIMAL(18, 2, asdecimal=False), nullable=False, default=0)
    employees: Mapped[list["Employee"]] = relationship(back_populates="role")

class Employee(Base):
    __tablename__ = "employees"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False)
    surname: Mapped[str] = mapped_column(String(80), nullable=False)
    hiring_date: Mapped[date] = mapped_column(Date, nullable=False)
    experience_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    salary: Mapped[float] = mapped_column(DECIMAL(18, 2, asdecimal=False), nullable=False, default=0)

    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id"), nullable=False, index=True)

    role: Mapped["Role"] = relationship(back_populates="employees")
    technologies: Mapped[list["Technology"]] = relationship(
        secondary=employee_technologies, back_populates="employees"
    )
    projects: Mapped[list["Project"]] = relationship(
        secondary=employee_projects, back_populates="employees"
    )
    customers: Mapped[list["Customer"]] = relationship(back_populates="employee")

    __table_args__ = (
        Index("ix_employees_hiring_date", "hiring_date"),
        Index("ix_employees_surname", "surname"),
    )

class Project(Base):
    __tablename__ = "projects"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    employees: Mapped[list["Employee"]] = relationship(
        secondary=employee_projects, back_populates="projects"
    )

class Technology(Base):
    __tablename__ = "technologies"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    employees: Mapped[list["Employee"]] = relationship(
        secondary=employee_technologies, back_populates="technologies"
    )

class Customer(Base):
    __tablename__ = "customers"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False)
    surname: Mapped[str] = mapped_column(String(80), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)

    employee_id: Mapped[int | None] = mapped_column(ForeignKey("employees.id"), index=True)
    employee: Mapped["Employee"] = relationship(back_populates="customers")
