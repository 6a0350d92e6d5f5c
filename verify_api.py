import requests
import json

BASE_URL = "http://localhost:8000/api"
ADMIN_PASSWORD = "admin123"

# 1x1 transparent PNG
PIXEL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2)[:1000])
    except ValueError:
        print(response.text)
    print("\n")

def run_verification():
    http = requests.Session()

    # 1. Create a product
    print("1. Creating product...")
    resp = http.post(f"{BASE_URL}/admin/products", json={
        "title": "Ergonomic office chair",
        "description": "Mesh back, adjustable arms",
        "price": "185000",
        "category": "furnitures",
        "subCategory": "office",
        "image": PIXEL,
        "password": ADMIN_PASSWORD
    })
    print_response("Create Product", resp)
    if resp.status_code != 201:
        print("Create failed, aborting.")
        return
    product_id = resp.json()["id"]

    # 2. Browse furniture for the office
    print("2. Browsing office furniture...")
    resp = http.get(f"{BASE_URL}/products", params={"category": "furnitures", "subCategory": "office"})
    print_response("Browse", resp)

    # 3. Add to cart twice (quantities merge)
    print("3. Adding to cart...")
    http.post(f"{BASE_URL}/cart/add", json={"productId": product_id, "quantity": 2})
    resp = http.post(f"{BASE_URL}/cart/add", json={"productId": product_id, "quantity": 3})
    print_response("Add To Cart", resp)

    # 4. Summary
    resp = http.get(f"{BASE_URL}/cart/summary")
    print_response("Cart Summary", resp)

    # 5. Remove the line and clean up
    resp = http.post(f"{BASE_URL}/cart/update", json={"productId": product_id, "quantity": 0})
    print_response("Remove Line", resp)
    resp = http.delete(f"{BASE_URL}/admin/products/{product_id}", params={"password": ADMIN_PASSWORD})
    print_response("Delete Product", resp)

if __name__ == "__main__":
    run_verification()
