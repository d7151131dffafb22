"""Façades de los servicios backend.

Cada módulo expone una clase ligada a un `ServiceName` que hereda de
`adapters.http_client.APIClient`.
"""

from adapters.services.behaviour import BehaviourService
from adapters.services.company import CompanyInternalController
from adapters.services.email_send import EmailSendController
from adapters.services.entity import EntityService
from adapters.services.entity_share import EntityShareAccessController
from adapters.services.full_text_search import FullTextSearchService
from adapters.services.gdpr import GDPRContactController
from adapters.services.inquiry import InquiryService
from adapters.services.is24_publish import IS24RealEstateController
from adapters.services.mailchimp import MailchimpController
from adapters.services.nylas import NylasService
from adapters.services.openimmo import OpenimmoReportRecipientsController
from adapters.services.portal import PortalController
from adapters.services.sample_data import BundleController
from adapters.services.search import SearchService
from adapters.services.slack import SlackIntegrationController
from adapters.services.template import TemplateService

__all__ = [
	"BehaviourService",
	"BundleController",
	"CompanyInternalController",
	"EmailSendController",
	"EntityService",
	"EntityShareAccessController",
	"FullTextSearchService",
	"GDPRContactController",
	"IS24RealEstateController",
	"InquiryService",
	"MailchimpController",
	"NylasService",
	"OpenimmoReportRecipientsController",
	"PortalController",
	"SearchService",
	"SlackIntegrationController",
	"TemplateService",
]
