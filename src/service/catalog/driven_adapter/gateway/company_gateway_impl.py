from typing import Any, Mapping

from src.service.catalog.driven_adapter.gateway.rest_catalog_gateway import RestCatalogGateway
from src.service.catalog.domain.entity.company_entity import Company


class CompanyGatewayImpl(RestCatalogGateway[Company]):
    resource_name = 'companies'
    list_path = '/companies/public'
    create_path = '/companies/'
    item_path = '/companies/{id}'

    def to_entity(self, data: Mapping[str, Any]) -> Company:
        return Company.from_dict(data)
