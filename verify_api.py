import requests
import json
import os

BASE_URL = f"http://localhost:{os.getenv('PORT', 3000)}"
ADMIN = "verify_admin"
CUSTOMER = "verify_customer"
PASSWORD = "SecurePassword123!"

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    print("\n")

def get_token(username, role):
    resp = requests.post(f"{BASE_URL}/register", json={
        "username": username,
        "password": PASSWORD,
        "role": role
    })
    print_response(f"Register {username}", resp)
    if resp.status_code == 409:
        # Already registered on a previous run
        resp = requests.post(f"{BASE_URL}/login", json={"username": username, "password": PASSWORD})
        print_response(f"Login {username}", resp)
    return resp.json()["token"]

def run_verification():
    # 1. Register or log in both roles
    print("1. Getting tokens...")
    admin_token = get_token(ADMIN, "admin")
    customer_token = get_token(CUSTOMER, "customer")

    # 2. Create a product as admin
    print("2. Adding Product...")
    resp = requests.post(
        f"{BASE_URL}/add-product",
        headers={"Authorization": admin_token},
        data={"name": "Verification Tea", "description": "Smoke test item", "price": "10.00"},
        files=[("images", ("tea.png", b"\x89PNG\r\n\x1a\n", "image/png"))],
    )
    print_response("Add Product", resp)
    if resp.status_code != 201:
        print("Product creation failed, aborting.")
        return
    product_id = resp.json()["id"]

    # 3. Customer must not be able to add products
    print("3. Adding Product as customer (Expected 403)...")
    resp = requests.post(
        f"{BASE_URL}/add-product",
        headers={"Authorization": customer_token},
        data={"name": "Nope", "description": "Nope", "price": "1"},
    )
    print_response("Add Product (customer)", resp)

    # 4. Fill the cart and total it
    print("4. Adding to Cart...")
    headers = {"Authorization": customer_token}
    resp = requests.post(f"{BASE_URL}/add-to-cart", headers=headers, json={"productId": product_id, "quantity": 3})
    print_response("Add To Cart", resp)

    resp = requests.get(f"{BASE_URL}/get-cart", headers=headers)
    print_response("Get Cart", resp)

    resp = requests.get(f"{BASE_URL}/calculate-total", headers=headers)
    print_response("Calculate Total", resp)

if __name__ == "__main__":
    run_verification()
