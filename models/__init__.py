from models.product import Product
