"""HTTP CRUD round trips for the catalogue, floor, expenses and HR families."""

from decimal import Decimal

API = "/api"


class TestCategoryCRUD:
    """Categories over HTTP."""

    def test_create_list_update_delete(self, client):
        res = client.post(f"{API}/categories", json={"name": "Drinks", "slug": "drinks"})
        assert res.status_code == 201
        category = res.json()
        assert category["name"] == "Drinks"

        res = client.get(f"{API}/categories")
        assert res.status_code == 200
        assert [c["id"] for c in res.json()] == [category["id"]]

        res = client.patch(f"{API}/categories/{category['id']}", json={"name": "Beverages"})
        assert res.status_code == 200
        assert res.json() == {"id": category["id"], "name": "Beverages", "slug": "drinks"}

        res = client.delete(f"{API}/categories/{category['id']}")
        assert res.status_code == 200
        assert res.json() == {"success": True}
        assert client.get(f"{API}/categories/{category['id']}").status_code == 404


class TestProductCRUD:
    """Products over HTTP."""

    def test_round_trip_with_defaults(self, client):
        category = client.post(f"{API}/categories", json={"name": "Drinks", "slug": "drinks"}).json()
        res = client.post(f"{API}/products", json={
            "name": "Cola",
            "price": "2.00",
            "categoryId": category["id"],
        })
        assert res.status_code == 201
        created = res.json()
        assert created["unit"] == "piece"
        assert Decimal(created["quantity"]) == 0
        assert created["price"] == "2.00"
        assert created["purchaseCost"] is None
        assert "createdAt" in created

        res = client.get(f"{API}/products/{created['id']}")
        assert res.status_code == 200
        assert res.json() == created

    def test_filter_by_category(self, client, menu):
        res = client.get(f"{API}/products", params={"categoryId": menu["drinks"].id})
        assert res.status_code == 200
        assert {p["name"] for p in res.json()} == {"Cola", "Tea"}

        res = client.get(f"{API}/products")
        assert len(res.json()) == 3

    def test_partial_update(self, client, menu):
        res = client.patch(f"{API}/products/{menu['cola'].id}", json={"price": "2.25", "quantity": "40"})
        assert res.status_code == 200
        data = res.json()
        assert data["price"] == "2.25"
        assert Decimal(data["quantity"]) == 40
        assert data["name"] == "Cola"

    def test_snake_case_accepted(self, client, menu):
        res = client.post(f"{API}/products", json={
            "name": "Water",
            "price": "1.00",
            "category_id": menu["drinks"].id,
        })
        assert res.status_code == 201
        assert res.json()["categoryId"] == menu["drinks"].id

    def test_validation_error_is_400(self, client):
        res = client.post(f"{API}/products", json={"name": "No price"})
        assert res.status_code == 400
        body = res.json()
        assert body["detail"] == "Invalid request data"
        assert body["errors"]

    def test_negative_price_rejected(self, client, menu):
        res = client.post(f"{API}/products", json={
            "name": "Bad", "price": "-1", "categoryId": menu["drinks"].id,
        })
        assert res.status_code == 400

    def test_not_found_is_404(self, client):
        res = client.get(f"{API}/products/missing")
        assert res.status_code == 404
        assert res.json() == {"detail": "Product not found"}

        assert client.patch(f"{API}/products/missing", json={"name": "x"}).status_code == 404
        assert client.delete(f"{API}/products/missing").status_code == 404


class TestTables:
    """Dining tables over HTTP."""

    def test_create_defaults_available(self, client):
        res = client.post(f"{API}/tables", json={"tableNumber": "12", "capacity": "6"})
        assert res.status_code == 201
        assert res.json()["status"] == "available"

    def test_status_endpoint(self, client, menu):
        table_id = menu["table"].id
        res = client.patch(f"{API}/tables/{table_id}/status", json={"status": "reserved"})
        assert res.status_code == 200
        assert res.json()["status"] == "reserved"

    def test_status_required(self, client, menu):
        res = client.patch(f"{API}/tables/{menu['table'].id}/status", json={})
        assert res.status_code == 400

    def test_unknown_table(self, client):
        res = client.patch(f"{API}/tables/missing/status", json={"status": "available"})
        assert res.status_code == 404
        assert res.json() == {"detail": "Table not found"}


class TestExpensesAndPurchases:
    """Expense categories, expenses and purchases."""

    def test_expense_flow(self, client):
        category = client.post(f"{API}/expense-categories", json={"name": "Utilities"}).json()
        assert category["description"] is None

        res = client.post(f"{API}/expenses", json={
            "expenseDate": "2025-10-05T14:30:00",
            "categoryId": category["id"],
            "description": "Electricity",
            "amount": "150.00",
            "unit": "Unit",
            "quantity": "2",
            "total": "300.00",
        })
        assert res.status_code == 201
        expense = res.json()
        assert expense["total"] == "300.00"

        res = client.patch(f"{API}/expenses/{expense['id']}", json={"description": "Power bill"})
        assert res.json()["description"] == "Power bill"
        assert len(client.get(f"{API}/expenses").json()) == 1

        assert client.delete(f"{API}/expenses/{expense['id']}").json() == {"success": True}
        assert client.get(f"{API}/expenses").json() == []

    def test_purchase_flow(self, client, menu):
        res = client.post(f"{API}/purchases", json={
            "categoryId": menu["food"].id,
            "itemName": "Beef",
            "quantity": "10",
            "unit": "Kg",
            "price": "8.50",
            "purchaseDate": "2025-10-05T09:30:00",
        })
        assert res.status_code == 201
        purchase = res.json()
        assert purchase["itemName"] == "Beef"
        assert client.get(f"{API}/purchases/{purchase['id']}").json()["price"] == "8.50"

    def test_seeded_lists(self, seeded_client):
        assert len(seeded_client.get(f"{API}/expense-categories").json()) == 5
        assert len(seeded_client.get(f"{API}/expenses").json()) == 3
        assert len(seeded_client.get(f"{API}/purchases").json()) == 3


class TestHR:
    """Employees, attendance, leaves, payroll and staff salaries."""

    def test_seeded_employees(self, seeded_client):
        res = seeded_client.get(f"{API}/employees")
        assert res.status_code == 200
        employees = res.json()
        assert len(employees) == 8
        assert employees[0]["employeeId"] == "EMP001"
        assert employees[0]["email"] == "john.smith@restrobit.com"

    def test_employee_crud(self, client):
        res = client.post(f"{API}/employees", json={
            "employeeId": "EMP100",
            "name": "Ann Lee",
            "position": "Cashier",
            "department": "Service",
            "joiningDate": "2025-01-02T00:00:00",
            "salary": "2100.00",
        })
        assert res.status_code == 201
        employee = res.json()
        assert employee["status"] == "active"

        res = client.patch(f"{API}/employees/{employee['id']}", json={"status": "inactive"})
        assert res.json()["status"] == "inactive"

    def test_attendance_filters(self, client):
        for employee_id, day in [("e1", "2025-10-06"), ("e2", "2025-10-06"), ("e1", "2025-10-07")]:
            res = client.post(f"{API}/attendance", json={
                "employeeId": employee_id,
                "date": f"{day}T09:00:00",
                "checkIn": "09:00",
                "status": "present",
            })
            assert res.status_code == 201

        assert len(client.get(f"{API}/attendance").json()) == 3
        assert len(client.get(f"{API}/attendance", params={"date": "2025-10-06"}).json()) == 2
        assert len(client.get(f"{API}/attendance", params={"employeeId": "e1"}).json()) == 2
        both = client.get(f"{API}/attendance", params={"date": "2025-10-06", "employeeId": "e1"})
        assert len(both.json()) == 1
        assert client.get(f"{API}/attendance", params={"date": "garbage"}).status_code == 400

    def test_leave_approval(self, client):
        res = client.post(f"{API}/leaves", json={
            "employeeId": "e1",
            "leaveType": "annual",
            "startDate": "2025-11-01T00:00:00",
            "endDate": "2025-11-05T00:00:00",
            "reason": "Holiday",
        })
        assert res.status_code == 201
        leave = res.json()
        assert leave["status"] == "pending"

        res = client.patch(f"{API}/leaves/{leave['id']}", json={"status": "approved"})
        assert res.json()["status"] == "approved"
        assert len(client.get(f"{API}/leaves", params={"employeeId": "e1"}).json()) == 1
        assert client.get(f"{API}/leaves", params={"employeeId": "e2"}).json() == []

    def test_payroll_and_salaries(self, client):
        res = client.post(f"{API}/payroll", json={
            "employeeId": "e1",
            "month": "10",
            "year": "2025",
            "baseSalary": "3000.00",
            "bonus": "200.00",
            "netSalary": "3200.00",
        })
        assert res.status_code == 201
        payroll = res.json()
        assert Decimal(payroll["deductions"]) == 0
        assert payroll["status"] == "pending"
        assert len(client.get(f"{API}/payroll", params={"employeeId": "e1"}).json()) == 1

        res = client.post(f"{API}/staff-salaries", json={
            "employeeId": "e1",
            "salaryDate": "2025-10-31T00:00:00",
            "salaryAmount": "3000.00",
            "deductSalary": "100.00",
            "totalSalary": "2900.00",
        })
        assert res.status_code == 201
        salary = res.json()
        assert client.delete(f"{API}/staff-salaries/{salary['id']}").json() == {"success": True}
        assert client.get(f"{API}/staff-salaries/{salary['id']}").status_code == 404


class TestSettings:
    """Business settings singleton over HTTP."""

    def test_defaults_created_on_first_read(self, client):
        res = client.get(f"{API}/settings")
        assert res.status_code == 200
        data = res.json()
        assert data["businessName"] == "BondPos POS"
        assert data["invoicePrefix"] == "INV-"
        assert data["stockThreshold"] == 10

    def test_partial_update(self, client):
        first = client.get(f"{API}/settings").json()
        res = client.put(f"{API}/settings", json={"businessName": "Corner Cafe", "vatRate": "10"})
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == first["id"]
        assert data["businessName"] == "Corner Cafe"
        assert data["vatRate"] == "10"
        assert data["currency"] == first["currency"]
        assert client.get(f"{API}/settings").json()["businessName"] == "Corner Cafe"
