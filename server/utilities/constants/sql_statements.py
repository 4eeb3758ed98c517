# Write statements. Column lists follow table declaration order.
INSERT_CUSTOMER_SQL = (
    "INSERT INTO Customer (customerID, fName, lName, Address, phNo, DOB, gender) "
    "VALUES (:customer_id, :first_name, :last_name, :address, :phone, :dob, :gender)"
)
INSERT_ROOM_SQL = (
    "INSERT INTO Room (hotelID, roomNo, roomType) "
    "VALUES (:hotel_id, :room_no, :room_type)"
)
INSERT_MAINTENANCE_COMPANY_SQL = (
    "INSERT INTO MaintenanceCompany (cmpID, name, address, isCertified) "
    "VALUES (:company_id, :name, :address, :is_certified)"
)
INSERT_REPAIR_SQL = (
    "INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, description, repairType) "
    "VALUES (:repair_id, :hotel_id, :room_no, :company_id, :repair_date, :description, :repair_type)"
)
INSERT_BOOKING_SQL = (
    "INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price) "
    "VALUES (:booking_id, :customer_id, :hotel_id, :room_no, :booking_date, :num_people, :price)"
)
UPDATE_ASSIGNED_ROOM_SQL = (
    "UPDATE Assigned SET roomNo = :room_no "
    "WHERE hotelID = :hotel_id AND staffID = :staff_id"
)
INSERT_REQUEST_SQL = (
    "INSERT INTO Request (reqID, managerID, repairID, requestDate, description) "
    "VALUES (:request_id, :manager_id, :repair_id, :request_date, :description)"
)

# Lookups performed before a repair request is inserted
SELECT_HOTEL_MANAGER_SQL = "SELECT h.manager AS manager FROM Hotel h WHERE h.hotelID = :hotel_id"
SELECT_MAX_REQUEST_ID_SQL = "SELECT MAX(r.reqID) AS max_req_id FROM Request r"

# Reports. Projected columns carry lowercase aliases so the header line is
# the same on every backend.
COUNT_AVAILABLE_ROOMS_SQL = (
    "SELECT COUNT(*) AS available_rooms FROM Room r "
    "WHERE r.hotelID = :hotel_id "
    "AND r.roomNo NOT IN (SELECT b.roomNo FROM Booking b WHERE b.hotelID = :hotel_id)"
)
COUNT_BOOKED_ROOMS_SQL = (
    "SELECT COUNT(*) AS booked_rooms FROM Booking b WHERE b.hotelID = :hotel_id"
)
LIST_WEEKLY_BOOKINGS_SQL = (
    "SELECT b.bID AS bid, b.roomNo AS roomno, b.customer AS customer, b.bookingDate AS bookingdate "
    "FROM Booking b "
    "WHERE b.hotelID = :hotel_id "
    "AND b.bookingDate BETWEEN :start_date AND :end_date "
    "ORDER BY b.bookingDate ASC, b.roomNo ASC, b.bID ASC"
)
TOP_K_ROOM_PRICES_SQL = (
    "SELECT b.hotelID AS hotelid, b.roomNo AS roomno, MAX(b.price) AS price FROM Booking b "
    "WHERE b.bookingDate BETWEEN :start_date AND :end_date "
    "GROUP BY b.hotelID, b.roomNo "
    "ORDER BY price DESC, b.hotelID ASC, b.roomNo ASC "
    "LIMIT :k"
)
TOP_K_CUSTOMER_BOOKINGS_SQL = (
    "SELECT b.bID AS bid, b.hotelID AS hotelid, b.roomNo AS roomno, b.bookingDate AS bookingdate, b.price AS price "
    "FROM Booking b JOIN Customer c ON b.customer = c.customerID "
    "WHERE c.fName = :first_name AND c.lName = :last_name "
    "ORDER BY b.price DESC, b.bID ASC "
    "LIMIT :k"
)
CUSTOMER_TOTAL_COST_SQL = (
    "SELECT COALESCE(SUM(b.price), 0) AS total_cost "
    "FROM Booking b JOIN Customer c ON b.customer = c.customerID "
    "WHERE b.hotelID = :hotel_id "
    "AND c.fName = :first_name AND c.lName = :last_name "
    "AND b.bookingDate BETWEEN :start_date AND :end_date"
)
LIST_REPAIRS_BY_COMPANY_SQL = (
    "SELECT r.repairType AS repairtype, r.hotelID AS hotelid, r.roomNo AS roomno "
    "FROM Repair r JOIN MaintenanceCompany m ON r.mCompany = m.cmpID "
    "WHERE m.name = :company_name "
    "ORDER BY r.rID ASC"
)
TOP_K_MAINTENANCE_COMPANIES_SQL = (
    "SELECT m.cmpID AS cmpid, m.name AS name, COUNT(r.rID) AS repair_count "
    "FROM MaintenanceCompany m LEFT JOIN Repair r ON r.mCompany = m.cmpID "
    "GROUP BY m.cmpID, m.name "
    "ORDER BY repair_count DESC, m.cmpID ASC "
    "LIMIT :k"
)
REPAIRS_PER_YEAR_SQL = (
    "SELECT {year_expression} AS repair_year, COUNT(*) AS repair_count "
    "FROM Repair r "
    "WHERE r.hotelID = :hotel_id AND r.roomNo = :room_no "
    "GROUP BY repair_year "
    "ORDER BY repair_year ASC"
)

# Dialect specific year extraction for REPAIRS_PER_YEAR_SQL
YEAR_EXPRESSIONS = {
    "sqlite": "CAST(strftime('%Y', r.repairDate) AS INTEGER)",
    "postgresql": "CAST(EXTRACT(YEAR FROM r.repairDate) AS INTEGER)",
}
DEFAULT_YEAR_EXPRESSION = YEAR_EXPRESSIONS["postgresql"]
