"""
GraphQL operation documents used by the pages.

Field selections and variable shapes are kept as-is; the view code reads
exactly these fields.
"""

# ---------------------------------------------------------------------------
# Listing screen
# ---------------------------------------------------------------------------

GET_ALL_PRODUCTS_QUERY = """
query getAllProducts($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        status
        variants(first:1) {
          edges {
            node {
              id
              sku
            }
          }
        }
      }
    }
  }
}
"""

CREATE_PRODUCT_MUTATION = """
mutation populateProduct($product: ProductCreateInput!) {
  productCreate(product: $product) {
    product {
      id
      title
      handle
      status
      variants(first: 10) {
        edges {
          node {
            id
            price
            barcode
            createdAt
          }
        }
      }
    }
  }
}
"""

UPDATE_VARIANTS_MUTATION = """
mutation shopifyRemixTemplateUpdateVariant($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkUpdate(productId: $productId, variants: $variants) {
    productVariants {
      id
      price
      barcode
      createdAt
    }
  }
}
"""

# ---------------------------------------------------------------------------
# Product form
# ---------------------------------------------------------------------------

FORM_CREATE_PRODUCT_MUTATION = """
mutation createProduct($product: ProductCreateInput!) {
  productCreate(product: $product) {
    product {
      id
      title
      handle
      status
      variants(first: 10) {
        edges {
          node {
            id
            sku
            price
          }
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}
"""

# productVariantsBulkUpdate can't set the SKU directly; it goes through inventoryItem
FORM_UPDATE_VARIANT_MUTATION = """
mutation shopifyRemixTemplateUpdateVariant($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkUpdate(productId: $productId, variants: $variants) {
    productVariants {
      id
      price
      barcode
      createdAt
      sku
    }
    userErrors {
      field
      message
    }
  }
}
"""
