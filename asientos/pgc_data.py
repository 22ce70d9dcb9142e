"""
Built-in chart of accounts of the Spanish General Accounting Plan (PGC 2007).

Three-digit accounts of groups 1 to 9 as ``(code, name)`` rows. The table is
read-only; ChartOfAccounts.load_defaults() copies it into a registry.
"""

PGC_ACCOUNTS = (
    # Grupo 1: Financiación básica
    ("100", "Capital social"),
    ("101", "Fondo social"),
    ("102", "Capital"),
    ("103", "Socios por desembolsos no exigidos"),
    ("104", "Socios por aportaciones no dinerarias pendientes"),
    ("108", "Acciones o participaciones propias en situaciones especiales"),
    ("109", "Acciones o participaciones propias para reducción de capital"),
    ("110", "Prima de emisión o asunción"),
    ("111", "Otros instrumentos de patrimonio neto"),
    ("112", "Reserva legal"),
    ("113", "Reservas voluntarias"),
    ("114", "Reservas especiales"),
    ("115", "Reservas por pérdidas y ganancias actuariales y otros ajustes"),
    ("118", "Aportaciones de socios o propietarios"),
    ("119", "Diferencias por ajuste del capital a euros"),
    ("120", "Remanente"),
    ("121", "Resultados negativos de ejercicios anteriores"),
    ("129", "Resultado del ejercicio"),
    ("130", "Subvenciones oficiales de capital"),
    ("131", "Donaciones y legados de capital"),
    ("132", "Otras subvenciones, donaciones y legados"),
    ("133", "Ajustes por valoración en activos financieros disponibles para la venta"),
    ("134", "Operaciones de cobertura"),
    ("135", "Diferencias de conversión"),
    ("136", "Ajustes por valoración en activos no corrientes mantenidos para la venta"),
    ("137", "Ingresos fiscales a distribuir en varios ejercicios"),
    ("140", "Provisión por retribuciones a largo plazo al personal"),
    ("141", "Provisión para impuestos"),
    ("142", "Provisión para otras responsabilidades"),
    ("143", "Provisión por desmantelamiento, retiro o rehabilitación del inmovilizado"),
    ("145", "Provisión para actuaciones medioambientales"),
    ("146", "Provisión para reestructuraciones"),
    ("147", "Provisión por transacciones con pagos basados en instrumentos de patrimonio"),
    ("150", "Acciones o participaciones a largo plazo consideradas como pasivos financieros"),
    ("153", "Desembolsos no exigidos por acciones consideradas como pasivos financieros"),
    ("154", "Aportaciones no dinerarias pendientes por acciones consideradas como pasivos financieros"),
    ("160", "Deudas a largo plazo con entidades de crédito vinculadas"),
    ("161", "Proveedores de inmovilizado a largo plazo, partes vinculadas"),
    ("162", "Acreedores por arrendamiento financiero a largo plazo, partes vinculadas"),
    ("163", "Otras deudas a largo plazo con partes vinculadas"),
    ("170", "Deudas a largo plazo con entidades de crédito"),
    ("171", "Deudas a largo plazo"),
    ("172", "Deudas a largo plazo transformables en subvenciones, donaciones y legados"),
    ("173", "Proveedores de inmovilizado a largo plazo"),
    ("174", "Acreedores por arrendamiento financiero a largo plazo"),
    ("175", "Efectos a pagar a largo plazo"),
    ("176", "Pasivos por derivados financieros a largo plazo"),
    ("177", "Obligaciones y bonos"),
    ("178", "Obligaciones y bonos convertibles"),
    ("179", "Deudas representadas en otros valores negociables"),
    ("180", "Fianzas recibidas a largo plazo"),
    ("181", "Anticipos recibidos por ventas o prestaciones de servicios a largo plazo"),
    ("185", "Depósitos recibidos a largo plazo"),
    ("189", "Garantías financieras a largo plazo"),
    ("190", "Acciones o participaciones emitidas"),
    ("192", "Suscriptores de acciones"),
    ("194", "Capital emitido pendiente de inscripción"),
    ("195", "Acciones o participaciones emitidas consideradas como pasivos financieros"),
    ("197", "Suscriptores de acciones consideradas como pasivos financieros"),
    ("199", "Acciones emitidas consideradas como pasivos financieros pendientes de inscripción"),
    # Grupo 2: Activo no corriente
    ("200", "Investigación"),
    ("201", "Desarrollo"),
    ("202", "Concesiones administrativas"),
    ("203", "Propiedad industrial"),
    ("204", "Fondo de comercio"),
    ("205", "Derechos de traspaso"),
    ("206", "Aplicaciones informáticas"),
    ("209", "Anticipos para inmovilizaciones intangibles"),
    ("210", "Terrenos y bienes naturales"),
    ("211", "Construcciones"),
    ("212", "Instalaciones técnicas"),
    ("213", "Maquinaria"),
    ("214", "Utillaje"),
    ("215", "Otras instalaciones"),
    ("216", "Mobiliario"),
    ("217", "Equipos para procesos de información"),
    ("218", "Elementos de transporte"),
    ("219", "Otro inmovilizado material"),
    ("220", "Inversiones en terrenos y bienes naturales"),
    ("221", "Inversiones en construcciones"),
    ("230", "Adaptación de terrenos y bienes naturales"),
    ("231", "Construcciones en curso"),
    ("232", "Instalaciones técnicas en montaje"),
    ("233", "Maquinaria en montaje"),
    ("237", "Equipos para procesos de información en montaje"),
    ("239", "Anticipos para inmovilizaciones materiales"),
    ("240", "Participaciones a largo plazo en partes vinculadas"),
    ("241", "Valores representativos de deuda a largo plazo de partes vinculadas"),
    ("242", "Créditos a largo plazo a partes vinculadas"),
    ("249", "Desembolsos pendientes sobre participaciones a largo plazo en partes vinculadas"),
    ("250", "Inversiones financieras a largo plazo en instrumentos de patrimonio"),
    ("251", "Valores representativos de deuda a largo plazo"),
    ("252", "Créditos a largo plazo"),
    ("253", "Créditos a largo plazo por enajenación de inmovilizado"),
    ("254", "Créditos a largo plazo al personal"),
    ("255", "Activos por derivados financieros a largo plazo"),
    ("257", "Derechos de reembolso derivados de contratos de seguro"),
    ("258", "Imposiciones a largo plazo"),
    ("259", "Desembolsos pendientes sobre participaciones en el patrimonio neto a largo plazo"),
    ("260", "Fianzas constituidas a largo plazo"),
    ("265", "Depósitos constituidos a largo plazo"),
    ("280", "Amortización acumulada del inmovilizado intangible"),
    ("281", "Amortización acumulada del inmovilizado material"),
    ("282", "Amortización acumulada de las inversiones inmobiliarias"),
    ("290", "Deterioro de valor del inmovilizado intangible"),
    ("291", "Deterioro de valor del inmovilizado material"),
    ("292", "Deterioro de valor de las inversiones inmobiliarias"),
    ("293", "Deterioro de valor de participaciones a largo plazo en partes vinculadas"),
    ("294", "Deterioro de valor de valores representativos de deuda a largo plazo de partes vinculadas"),
    ("295", "Deterioro de valor de créditos a largo plazo a partes vinculadas"),
    ("296", "Deterioro de valor de participaciones en el patrimonio neto a largo plazo"),
    ("297", "Deterioro de valor de valores representativos de deuda a largo plazo"),
    ("298", "Deterioro de valor de créditos a largo plazo"),
    # Grupo 3: Existencias
    ("300", "Mercaderías A"),
    ("301", "Mercaderías B"),
    ("310", "Materias primas A"),
    ("311", "Materias primas B"),
    ("320", "Elementos y conjuntos incorporables"),
    ("321", "Combustibles"),
    ("322", "Repuestos"),
    ("325", "Materiales diversos"),
    ("326", "Embalajes"),
    ("327", "Envases"),
    ("328", "Material de oficina"),
    ("330", "Productos en curso A"),
    ("331", "Productos en curso B"),
    ("340", "Productos semiterminados A"),
    ("341", "Productos semiterminados B"),
    ("350", "Productos terminados A"),
    ("351", "Productos terminados B"),
    ("360", "Subproductos A"),
    ("361", "Subproductos B"),
    ("365", "Residuos A"),
    ("366", "Residuos B"),
    ("368", "Materiales recuperados A"),
    ("369", "Materiales recuperados B"),
    ("390", "Deterioro de valor de las mercaderías"),
    ("391", "Deterioro de valor de las materias primas"),
    ("392", "Deterioro de valor de otros aprovisionamientos"),
    ("393", "Deterioro de valor de los productos en curso"),
    ("394", "Deterioro de valor de los productos semiterminados"),
    ("395", "Deterioro de valor de los productos terminados"),
    ("396", "Deterioro de valor de los subproductos, residuos y materiales recuperados"),
    # Grupo 4: Acreedores y deudores por operaciones comerciales
    ("400", "Proveedores"),
    ("401", "Proveedores, efectos comerciales a pagar"),
    ("403", "Proveedores, empresas del grupo"),
    ("404", "Proveedores, empresas asociadas"),
    ("405", "Proveedores, otras partes vinculadas"),
    ("406", "Envases y embalajes a devolver a proveedores"),
    ("407", "Anticipos a proveedores"),
    ("410", "Acreedores por prestaciones de servicios"),
    ("411", "Acreedores, efectos comerciales a pagar"),
    ("419", "Acreedores por operaciones en común"),
    ("430", "Clientes"),
    ("431", "Clientes, efectos comerciales a cobrar"),
    ("432", "Clientes, operaciones de factoring"),
    ("433", "Clientes, empresas del grupo"),
    ("434", "Clientes, empresas asociadas"),
    ("435", "Clientes, otras partes vinculadas"),
    ("436", "Clientes de dudoso cobro"),
    ("437", "Envases y embalajes a devolver por clientes"),
    ("438", "Anticipos de clientes"),
    ("440", "Deudores"),
    ("441", "Deudores, efectos comerciales a cobrar"),
    ("446", "Deudores de dudoso cobro"),
    ("449", "Deudores por operaciones en común"),
    ("460", "Anticipos de remuneraciones"),
    ("465", "Remuneraciones pendientes de pago"),
    ("466", "Remuneraciones mediante sistemas de aportación definida pendientes de pago"),
    ("470", "Hacienda Pública, deudora por diversos conceptos"),
    ("471", "Organismos de la Seguridad Social, deudores"),
    ("472", "Hacienda Pública, IVA soportado"),
    ("473", "Hacienda Pública, retenciones y pagos a cuenta"),
    ("474", "Activos por impuesto diferido"),
    ("475", "Hacienda Pública, acreedora por conceptos fiscales"),
    ("476", "Organismos de la Seguridad Social, acreedores"),
    ("477", "Hacienda Pública, IVA repercutido"),
    ("479", "Pasivos por diferencias temporarias imponibles"),
    ("480", "Gastos anticipados"),
    ("485", "Ingresos anticipados"),
    ("490", "Deterioro de valor de créditos por operaciones comerciales"),
    ("493", "Deterioro de valor de créditos por operaciones comerciales con partes vinculadas"),
    ("499", "Provisiones por operaciones comerciales"),
    # Grupo 5: Cuentas financieras
    ("500", "Obligaciones y bonos a corto plazo"),
    ("505", "Deudas representadas en otros valores negociables a corto plazo"),
    ("506", "Intereses a corto plazo de empréstitos y otras emisiones análogas"),
    ("509", "Valores negociables amortizados"),
    ("510", "Deudas a corto plazo con entidades de crédito vinculadas"),
    ("511", "Proveedores de inmovilizado a corto plazo, partes vinculadas"),
    ("512", "Acreedores por arrendamiento financiero a corto plazo, partes vinculadas"),
    ("513", "Otras deudas a corto plazo con partes vinculadas"),
    ("514", "Intereses a corto plazo de deudas con partes vinculadas"),
    ("520", "Deudas a corto plazo con entidades de crédito"),
    ("521", "Deudas a corto plazo"),
    ("522", "Deudas a corto plazo transformables en subvenciones, donaciones y legados"),
    ("523", "Proveedores de inmovilizado a corto plazo"),
    ("524", "Acreedores por arrendamiento financiero a corto plazo"),
    ("525", "Efectos a pagar a corto plazo"),
    ("526", "Dividendo activo a pagar"),
    ("527", "Intereses a corto plazo de deudas con entidades de crédito"),
    ("528", "Intereses a corto plazo de deudas"),
    ("529", "Provisiones a corto plazo"),
    ("530", "Participaciones a corto plazo en partes vinculadas"),
    ("531", "Valores representativos de deuda a corto plazo de partes vinculadas"),
    ("532", "Créditos a corto plazo a partes vinculadas"),
    ("533", "Intereses a corto plazo de valores representativos de deuda de partes vinculadas"),
    ("534", "Intereses a corto plazo de créditos a partes vinculadas"),
    ("535", "Dividendo a cobrar de inversiones financieras en partes vinculadas"),
    ("539", "Desembolsos pendientes sobre participaciones a corto plazo en partes vinculadas"),
    ("540", "Inversiones financieras a corto plazo en instrumentos de patrimonio"),
    ("541", "Valores representativos de deuda a corto plazo"),
    ("542", "Créditos a corto plazo"),
    ("543", "Créditos a corto plazo por enajenación de inmovilizado"),
    ("544", "Créditos a corto plazo al personal"),
    ("545", "Dividendo a cobrar"),
    ("546", "Intereses a corto plazo de valores representativos de deudas"),
    ("547", "Intereses a corto plazo de créditos"),
    ("548", "Imposiciones a corto plazo"),
    ("549", "Desembolsos pendientes sobre participaciones en el patrimonio neto a corto plazo"),
    ("550", "Titular de la explotación"),
    ("551", "Cuenta corriente con socios y administradores"),
    ("552", "Cuenta corriente con otras personas y entidades vinculadas"),
    ("553", "Cuentas corrientes en fusiones y escisiones"),
    ("554", "Cuenta corriente con uniones temporales de empresas y comunidades de bienes"),
    ("555", "Partidas pendientes de aplicación"),
    ("556", "Desembolsos exigidos sobre participaciones en el patrimonio neto"),
    ("557", "Dividendo activo a cuenta"),
    ("558", "Socios por desembolsos exigidos"),
    ("559", "Derivados financieros a corto plazo"),
    ("560", "Fianzas recibidas a corto plazo"),
    ("561", "Depósitos recibidos a corto plazo"),
    ("565", "Fianzas constituidas a corto plazo"),
    ("566", "Depósitos constituidos a corto plazo"),
    ("567", "Intereses pagados por anticipado"),
    ("568", "Intereses cobrados por anticipado"),
    ("569", "Garantías financieras a corto plazo"),
    ("570", "Caja, euros"),
    ("571", "Caja, moneda extranjera"),
    ("572", "Bancos e instituciones de crédito c/c vista, euros"),
    ("573", "Bancos e instituciones de crédito c/c vista, moneda extranjera"),
    ("574", "Bancos e instituciones de crédito, cuentas de ahorro, euros"),
    ("575", "Bancos e instituciones de crédito, cuentas de ahorro, moneda extranjera"),
    ("576", "Inversiones a corto plazo de gran liquidez"),
    ("580", "Inmovilizado"),
    ("581", "Inversiones con personas y entidades vinculadas"),
    ("582", "Inversiones financieras"),
    ("583", "Existencias, deudores comerciales y otras cuentas a cobrar"),
    ("584", "Otros activos"),
    ("585", "Provisiones"),
    ("586", "Deudas con características especiales"),
    ("587", "Deudas con personas y entidades vinculadas"),
    ("588", "Acreedores comerciales y otras cuentas a pagar"),
    ("589", "Otros pasivos"),
    ("590", "Deterioro de valor de participaciones a corto plazo en partes vinculadas"),
    ("593", "Deterioro de valor de activos no corrientes mantenidos para la venta"),
    ("594", "Deterioro de valor de valores representativos de deuda a corto plazo de partes vinculadas"),
    ("595", "Deterioro de valor de créditos a corto plazo a partes vinculadas"),
    ("597", "Deterioro de valor de valores representativos de deuda a corto plazo"),
    ("598", "Deterioro de valor de créditos a corto plazo"),
    # Grupo 6: Compras y gastos
    ("600", "Compras de mercaderías"),
    ("601", "Compras de materias primas"),
    ("602", "Compras de otros aprovisionamientos"),
    ("606", "Descuentos sobre compras por pronto pago"),
    ("607", "Trabajos realizados por otras empresas"),
    ("608", "Devoluciones de compras y operaciones similares"),
    ("609", "Rappels por compras"),
    ("610", "Variación de existencias de mercaderías"),
    ("611", "Variación de existencias de materias primas"),
    ("612", "Variación de existencias de otros aprovisionamientos"),
    ("620", "Gastos en investigación y desarrollo del ejercicio"),
    ("621", "Arrendamientos y cánones"),
    ("622", "Reparaciones y conservación"),
    ("623", "Servicios de profesionales independientes"),
    ("624", "Transportes"),
    ("625", "Primas de seguros"),
    ("626", "Servicios bancarios y similares"),
    ("627", "Publicidad, propaganda y relaciones públicas"),
    ("628", "Suministros"),
    ("629", "Otros servicios"),
    ("630", "Impuesto sobre beneficios"),
    ("631", "Otros tributos"),
    ("633", "Ajustes negativos en la imposición sobre beneficios"),
    ("634", "Ajustes negativos en la imposición indirecta"),
    ("636", "Devolución de impuestos"),
    ("638", "Ajustes positivos en la imposición sobre beneficios"),
    ("639", "Ajustes positivos en la imposición indirecta"),
    ("640", "Sueldos y salarios"),
    ("641", "Indemnizaciones"),
    ("642", "Seguridad Social a cargo de la empresa"),
    ("643", "Retribuciones a largo plazo mediante sistemas de aportación definida"),
    ("649", "Otros gastos sociales"),
    ("650", "Pérdidas de créditos comerciales incobrables"),
    ("651", "Resultados de operaciones en común"),
    ("659", "Otras pérdidas en gestión corriente"),
    ("660", "Gastos financieros por actualización de provisiones"),
    ("661", "Intereses de obligaciones y bonos"),
    ("662", "Intereses de deudas"),
    ("663", "Pérdidas por valoración de instrumentos financieros por su valor razonable"),
    ("665", "Intereses por descuento de efectos y operaciones de factoring"),
    ("666", "Pérdidas en participaciones y valores representativos de deuda"),
    ("667", "Pérdidas de créditos no comerciales"),
    ("668", "Diferencias negativas de cambio"),
    ("669", "Otros gastos financieros"),
    ("670", "Pérdidas procedentes del inmovilizado intangible"),
    ("671", "Pérdidas procedentes del inmovilizado material"),
    ("672", "Pérdidas procedentes de las inversiones inmobiliarias"),
    ("678", "Gastos excepcionales"),
    ("680", "Amortización del inmovilizado intangible"),
    ("681", "Amortización del inmovilizado material"),
    ("682", "Amortización de las inversiones inmobiliarias"),
    ("690", "Pérdidas por deterioro del inmovilizado intangible"),
    ("691", "Pérdidas por deterioro del inmovilizado material"),
    ("693", "Pérdidas por deterioro de existencias"),
    ("694", "Pérdidas por deterioro de créditos por operaciones comerciales"),
    ("695", "Dotación a la provisión por operaciones comerciales"),
    ("698", "Pérdidas por deterioro de participaciones y valores representativos de deuda a largo plazo"),
    ("699", "Pérdidas por deterioro de créditos a corto plazo"),
    # Grupo 7: Ventas e ingresos
    ("700", "Ventas de mercaderías"),
    ("701", "Ventas de productos terminados"),
    ("702", "Ventas de productos semiterminados"),
    ("703", "Ventas de subproductos y residuos"),
    ("704", "Ventas de envases y embalajes"),
    ("705", "Prestaciones de servicios"),
    ("706", "Descuentos sobre ventas por pronto pago"),
    ("708", "Devoluciones de ventas y operaciones similares"),
    ("709", "Rappels sobre ventas"),
    ("710", "Variación de existencias de productos en curso"),
    ("711", "Variación de existencias de productos semiterminados"),
    ("712", "Variación de existencias de productos terminados"),
    ("713", "Variación de existencias de subproductos, residuos y materiales recuperados"),
    ("730", "Trabajos realizados para el inmovilizado intangible"),
    ("731", "Trabajos realizados para el inmovilizado material"),
    ("740", "Subvenciones, donaciones y legados a la explotación"),
    ("746", "Subvenciones, donaciones y legados de capital transferidos al resultado del ejercicio"),
    ("747", "Otras subvenciones, donaciones y legados transferidos al resultado del ejercicio"),
    ("751", "Resultados de operaciones en común"),
    ("752", "Ingresos por arrendamientos"),
    ("753", "Ingresos de propiedad industrial cedida en explotación"),
    ("754", "Ingresos por comisiones"),
    ("755", "Ingresos por servicios al personal"),
    ("759", "Ingresos por servicios diversos"),
    ("760", "Ingresos de participaciones en instrumentos de patrimonio"),
    ("761", "Ingresos de valores representativos de deuda"),
    ("762", "Ingresos de créditos"),
    ("763", "Beneficios por valoración de instrumentos financieros por su valor razonable"),
    ("766", "Beneficios en participaciones y valores representativos de deuda"),
    ("768", "Diferencias positivas de cambio"),
    ("769", "Otros ingresos financieros"),
    ("770", "Beneficios procedentes del inmovilizado intangible"),
    ("771", "Beneficios procedentes del inmovilizado material"),
    ("772", "Beneficios procedentes de las inversiones inmobiliarias"),
    ("778", "Ingresos excepcionales"),
    ("790", "Reversión del deterioro del inmovilizado intangible"),
    ("791", "Reversión del deterioro del inmovilizado material"),
    ("793", "Reversión del deterioro de existencias"),
    ("794", "Reversión del deterioro de créditos por operaciones comerciales"),
    ("795", "Exceso de provisiones"),
    # Grupo 8: Gastos imputados al patrimonio neto
    ("800", "Pérdidas en activos financieros disponibles para la venta"),
    ("802", "Transferencia de beneficios en activos financieros disponibles para la venta"),
    ("810", "Pérdidas por coberturas de flujos de efectivo"),
    ("812", "Transferencia de beneficios por coberturas de flujos de efectivo"),
    ("820", "Diferencias de conversión negativas"),
    ("821", "Transferencia de diferencias de conversión positivas"),
    ("830", "Impuesto sobre beneficios"),
    ("833", "Ajustes negativos en la imposición sobre beneficios"),
    ("834", "Ingresos fiscales por diferencias permanentes"),
    ("835", "Ingresos fiscales por deducciones y bonificaciones"),
    ("836", "Transferencia de diferencias permanentes"),
    ("837", "Transferencia de deducciones y bonificaciones"),
    ("838", "Ajustes positivos en la imposición sobre beneficios"),
    ("850", "Pérdidas actuariales"),
    ("851", "Ajustes negativos en activos por retribuciones a largo plazo de prestación definida"),
    ("860", "Pérdidas en activos no corrientes mantenidos para la venta"),
    ("862", "Transferencia de beneficios en activos no corrientes mantenidos para la venta"),
    ("891", "Deterioro de participaciones en el patrimonio, empresas del grupo"),
    ("892", "Deterioro de participaciones en el patrimonio, empresas asociadas"),
    # Grupo 9: Ingresos imputados al patrimonio neto
    ("900", "Beneficios en activos financieros disponibles para la venta"),
    ("902", "Transferencia de pérdidas de activos financieros disponibles para la venta"),
    ("910", "Beneficios por coberturas de flujos de efectivo"),
    ("912", "Transferencia de pérdidas por coberturas de flujos de efectivo"),
    ("920", "Diferencias de conversión positivas"),
    ("921", "Transferencia de diferencias de conversión negativas"),
    ("940", "Ingresos de subvenciones oficiales de capital"),
    ("941", "Ingresos de donaciones y legados de capital"),
    ("942", "Ingresos de otras subvenciones, donaciones y legados"),
    ("950", "Ganancias actuariales"),
    ("951", "Ajustes positivos en activos por retribuciones a largo plazo de prestación definida"),
    ("960", "Beneficios en activos no corrientes mantenidos para la venta"),
    ("962", "Transferencia de pérdidas en activos no corrientes mantenidos para la venta"),
    ("991", "Recuperación de ajustes valorativos negativos previos, empresas del grupo"),
    ("992", "Recuperación de ajustes valorativos negativos previos, empresas asociadas"),
)
