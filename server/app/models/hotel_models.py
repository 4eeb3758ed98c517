from sqlalchemy import (Boolean, Column, Date, ForeignKey, ForeignKeyConstraint,
                        Integer, String, Text)
from app.db import HotelBase


class Hotel(HotelBase):
    __tablename__ = "hotel"

    hotelid = Column(Integer, primary_key=True)
    address = Column(String(50), nullable=True)
    # Staff.ssn of the hotel's manager
    manager = Column(Integer, nullable=False)


class Staff(HotelBase):
    __tablename__ = "staff"

    ssn = Column(Integer, primary_key=True)
    fname = Column(String(30), nullable=False)
    lname = Column(String(30), nullable=False)
    address = Column(String(50), nullable=True)
    role = Column(String(20), nullable=True)
    employerid = Column(Integer, ForeignKey("hotel.hotelid"), nullable=True)


class Customer(HotelBase):
    __tablename__ = "customer"

    customerid = Column(Integer, primary_key=True)
    fname = Column(String(30), nullable=False)
    lname = Column(String(30), nullable=False)
    address = Column(Text, nullable=True)
    phno = Column(String(20), nullable=True)
    dob = Column(Date, nullable=True)
    gender = Column(String(10), nullable=True)


class Room(HotelBase):
    __tablename__ = "room"

    hotelid = Column(Integer, ForeignKey("hotel.hotelid"), primary_key=True)
    roomno = Column(Integer, primary_key=True)
    roomtype = Column(String(10), nullable=False)


class MaintenanceCompany(HotelBase):
    __tablename__ = "maintenancecompany"

    cmpid = Column(Integer, primary_key=True)
    name = Column(String(10), nullable=False)
    address = Column(Text, nullable=True)
    iscertified = Column(Boolean, nullable=False)


class Repair(HotelBase):
    __tablename__ = "repair"
    __table_args__ = (
        ForeignKeyConstraint(["hotelid", "roomno"], ["room.hotelid", "room.roomno"]),
    )

    rid = Column(Integer, primary_key=True)
    hotelid = Column(Integer, nullable=False)
    roomno = Column(Integer, nullable=False)
    mcompany = Column(Integer, ForeignKey("maintenancecompany.cmpid"), nullable=False)
    repairdate = Column(Date, nullable=False)
    description = Column(Text, nullable=True)
    repairtype = Column(String(10), nullable=True)


class Booking(HotelBase):
    __tablename__ = "booking"
    __table_args__ = (
        ForeignKeyConstraint(["hotelid", "roomno"], ["room.hotelid", "room.roomno"]),
    )

    bid = Column(Integer, primary_key=True)
    customer = Column(Integer, ForeignKey("customer.customerid"), nullable=False)
    hotelid = Column(Integer, nullable=False)
    roomno = Column(Integer, nullable=False)
    bookingdate = Column(Date, nullable=False)
    noofpeople = Column(Integer, nullable=True)
    price = Column(Integer, nullable=True)


class Assigned(HotelBase):
    __tablename__ = "assigned"
    __table_args__ = (
        ForeignKeyConstraint(["hotelid", "roomno"], ["room.hotelid", "room.roomno"]),
    )

    asgid = Column(Integer, primary_key=True)
    staffid = Column(Integer, ForeignKey("staff.ssn"), nullable=False)
    hotelid = Column(Integer, nullable=False)
    roomno = Column(Integer, nullable=False)


class Request(HotelBase):
    __tablename__ = "request"

    reqid = Column(Integer, primary_key=True)
    managerid = Column(Integer, ForeignKey("staff.ssn"), nullable=False)
    repairid = Column(Integer, ForeignKey("repair.rid"), nullable=False)
    requestdate = Column(Date, nullable=False)
    description = Column(Text, nullable=True)
